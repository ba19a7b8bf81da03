from .entity import AggregateRoot, Entity
from .exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    MediaUploadException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from .repository import Repository
from .value_object import GuestId, RoomId

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "MediaUploadException",
    "RoomId",
    "GuestId",
]
