import logging

from .models import Profile

logger = logging.getLogger(__name__)


def ensure_profile(user, role='customer'):
    """Return the user's profile, creating it with ``role`` on first access."""
    profile, created = Profile.objects.get_or_create(user=user, defaults={'role': role})
    if created:
        logger.info("Created %s profile for user %s", role, user.pk)
    return profile


def ensure_owner_profile(user):
    """Listing a vehicle makes a customer an owner. Admins keep their role."""
    profile = ensure_profile(user, role='owner')
    if profile.role == 'customer':
        profile.role = 'owner'
        profile.save(update_fields=['role'])
        logger.info("Promoted user %s to owner", user.pk)
    return profile


def is_admin(user):
    if user.is_staff or user.is_superuser:
        return True
    profile = getattr(user, 'profile', None)
    return profile is not None and profile.role == 'admin'
