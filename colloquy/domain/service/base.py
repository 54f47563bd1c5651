"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services carry the rules that span more than one comment: moderation,
    access control, reply counters and thread assembly.
    """
