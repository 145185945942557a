class TrackerKeys:
    """Centralised tracker key vocabulary.

    Keys follow ``{namespace}_{app_id}:[{event_id}:]{segment}:...``; these are
    the literal segments shared with the write path and must stay bit-exact.
    """

    DEFAULT_NAMESPACE = "trk"

    # Separators
    NAMESPACE_SEPARATOR = "_"
    SEGMENT_SEPARATOR = ":"

    # Collections
    EVENTS = "events"
    HASHED = "hashed"
    OBJECTS = "oid"
    ENVIRONMENTS = "env"

    # Counter segments
    USER = "user"
    OBJECT = "oid"
    ENV = "env"
    COUNTS = "counts"

    # Reserved values
    ALL = "all"
    UNIQUE_USER = "unique"

    @classmethod
    def dimension(cls, name: str, value: str) -> str:
        """Render a ``name:value`` dimension segment."""
        return f"{name}{cls.SEGMENT_SEPARATOR}{value}"

    @classmethod
    def prefix(cls, namespace: str, app_id: str) -> str:
        """Key prefix scoping every key to one namespace/app pair."""
        return f"{namespace}{cls.NAMESPACE_SEPARATOR}{app_id}"
