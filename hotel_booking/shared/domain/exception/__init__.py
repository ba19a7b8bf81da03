from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    MediaUploadException,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "MediaUploadException",
]
