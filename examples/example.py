"""Example usage of mfadefault: set PhoneAppOTP as default for several accounts."""
# Copyright (c) 2025 mfadefault. All rights reserved.

import logging
import sys

from mfadefault import (
    DirectoryClient,
    DirectorySettings,
    MFADefaultSetter,
    MFAMethodType,
)
from mfadefault.exceptions import AuthenticationError, DirectoryError


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ACCOUNTS = [
    "adele.vance@contoso.test",
    "alex.wilber@contoso.test",
    "megan.bowen@contoso.test",
]


def main() -> int:
    """Execute main example function."""
    settings = DirectorySettings.from_env()
    credential = settings.credential()

    failed = 0
    with DirectoryClient.from_settings(settings) as client:
        try:
            client.connect(credential)
        except AuthenticationError as e:
            logger.error("Could not connect to the directory: %s", e.message)
            return 1

        setter = MFADefaultSetter(client)
        # Batching is the caller's job: one call per account.
        for principal_name in ACCOUNTS:
            try:
                result = setter.set_default_method(
                    principal_name, MFAMethodType.PHONE_APP_OTP
                )
            except DirectoryError as e:
                logger.error("%s: %s (%s)", principal_name, e.message, e.code)
                failed += 1
                continue

            if not result.succeeded:
                failed += 1
            logger.info("%s: %s", principal_name, result.status.value)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
