"""
Pagador status vocabularies.

Authorize and capture replies use separate status code sets whose literals
overlap ("2" means denied in both). Keeping them as two enumerations avoids
comparing raw strings across vocabularies.

The two authorize-and-capture cards report a *capture* status from the
authorize call. That mirrors the real processor's one-step
authorize-and-capture reply and is kept as-is.
"""

from enum import Enum

from fake_braspag.domain.cards import CardProfile


class AuthorizeStatus(str, Enum):
    """Status codes of the Authorize reply."""

    AUTHORIZED = "1"
    DENIED = "2"


class CaptureStatus(str, Enum):
    """Status codes of the Capture reply."""

    CAPTURED = "0"
    DENIED = "2"


# Status reported by the authorize call, per card profile
AUTHORIZE_STATUS_BY_PROFILE: dict[CardProfile, AuthorizeStatus | CaptureStatus] = {
    CardProfile.AUTHORIZE_OK: AuthorizeStatus.AUTHORIZED,
    CardProfile.CAPTURE_OK: AuthorizeStatus.AUTHORIZED,
    CardProfile.CAPTURE_DENIED: AuthorizeStatus.AUTHORIZED,
    CardProfile.AUTHORIZE_DENIED: AuthorizeStatus.DENIED,
    CardProfile.AUTHORIZE_AND_CAPTURE_OK: CaptureStatus.CAPTURED,
    CardProfile.AUTHORIZE_AND_CAPTURE_DENIED: CaptureStatus.DENIED,
}

# Status reported by the capture call, per card profile ledgered at authorize time.
# Profiles missing here have no capture outcome.
CAPTURE_STATUS_BY_PROFILE: dict[CardProfile, CaptureStatus] = {
    CardProfile.CAPTURE_OK: CaptureStatus.CAPTURED,
    CardProfile.AUTHORIZE_AND_CAPTURE_OK: CaptureStatus.CAPTURED,
    CardProfile.CAPTURE_DENIED: CaptureStatus.DENIED,
    CardProfile.AUTHORIZE_AND_CAPTURE_DENIED: CaptureStatus.DENIED,
}

# Profiles whose authorization succeeds (every known card except AUTHORIZE_DENIED)
AUTHORIZING_PROFILES: frozenset[CardProfile] = frozenset(
    profile for profile in CardProfile if profile is not CardProfile.AUTHORIZE_DENIED
)
