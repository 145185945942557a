from typing import Any, Mapping, Optional, Protocol, Set, Union, runtime_checkable

Text = Union[str, bytes]

REQUIRED_OPERATIONS = ("smembers", "hgetall", "get", "bitcount")


@runtime_checkable
class StoreClient(Protocol):
    """The slice of the Redis command set the reader depends on.

    ``redis.Redis`` and ``fakeredis.FakeRedis`` satisfy it as-is; values are
    ``str`` with ``decode_responses=True`` and ``bytes`` otherwise.
    """

    def smembers(self, name: str) -> Set[Text]: ...

    def hgetall(self, name: str) -> Mapping[Text, Text]: ...

    def get(self, name: str) -> Optional[Any]: ...

    def bitcount(self, key: str) -> int: ...


def missing_operations(client: object) -> list[str]:
    return [op for op in REQUIRED_OPERATIONS if not callable(getattr(client, op, None))]
