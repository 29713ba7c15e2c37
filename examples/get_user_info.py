"""Example fetching a user's profile with credentials taken from the environment."""
import logging
import sys

from gigya_sdk import ClientConfig, Gigya, GigyaSDKError


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    uid = sys.argv[1] if len(sys.argv) > 1 else "_guid_example"

    gigya = Gigya(ClientConfig.from_env())
    try:
        user = gigya.socialize.get_user_info({"uid": uid})
    except GigyaSDKError as exc:
        print("Call failed:", exc.code, exc.details)
        return

    print("Nickname:", user.get("nickname"))
    print(
        "Signature valid:",
        gigya.validate_user_signature(
            user.get("UIDSignature"), user.get("signatureTimestamp"), user.get("UID")
        ),
    )


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
