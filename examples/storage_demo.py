# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import asyncio
import logging

from conform import InterfaceSpec, InterfaceSpecBuilder, interface, provides, validate
from conform.exceptions import ValidationError

# Basic logging setup
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


# --- Declare the contract ---

Storage = (
    InterfaceSpecBuilder("Storage")
    .signature("get", lambda key: None)
    .signature("put", lambda key, value: None)
    .member("delete", 1)
    .build()
)


# --- Three implementations, one per way of handing them in ---

# 1. A plain mapping of functions, with a private helper
_data = {}

memory_impl = {
    "get": lambda key: _data.get(key),
    "put": lambda key, value: _data.__setitem__(key, value),
    "delete": lambda key: _data.pop(key, None),
    "_dump": lambda: dict(_data),
}


# 2. An object whose public methods form the implementation
class DictStorage:
    def __init__(self):
        self._items = {}

    def get(self, key):
        return self._items.get(key)

    def put(self, key, value):
        self._items[key] = value

    def delete(self, key):
        self._items.pop(key, None)


# 3. A factory validated on every call, falling back to the memory storage
def fallback_handler(error: ValidationError):
    logging.warning("Plugin storage rejected (%s): %s", error.kind.value, error)
    return validate(Storage, memory_impl)


@provides(Storage, on_violation=fallback_handler)
async def plugin_storage():
    """A plugin that forgot to implement delete()."""
    await asyncio.sleep(0.01)
    return {"get": lambda key: None, "put": lambda key, value: None}


async def main():
    storage = validate(Storage, memory_impl)
    storage.put("greeting", "hello")
    logging.info("memory storage: greeting=%s", storage.get("greeting"))

    objects = validate(Storage, DictStorage())
    objects.put("answer", 42)
    logging.info("object storage: answer=%s", objects.get("answer"))

    plugin = await plugin_storage()
    logging.info("plugin storage resolved to %r", plugin)

    # The single-call form declares and validates in one step
    Counter = InterfaceSpec.from_signatures("Counter", increment=lambda amount: None)
    logging.info("counter members: %s", dict(Counter.members))
    try:
        interface(
            type="Counter",
            increment=lambda amount: None,
            implementation={"increment": lambda: 1},
        )
    except ValidationError as error:
        logging.error("%s", error)


if __name__ == "__main__":
    asyncio.run(main())
