"""API route reporting whether the provider credential is configured."""

from fastapi import APIRouter

from ...config import API_KEY_ENV, get_api_key
from ...schemas import EnvCheckResp

router = APIRouter(prefix="/api")

# keys shorter than this are treated as placeholders
MIN_KEY_LENGTH = 11


@router.get("/envcheck", response_model=EnvCheckResp)
def envcheck() -> dict:
    """Report presence and length of the credential, never its value.

    :return: Credential diagnostic.
    """
    key = get_api_key()
    return {
        "hasGEMINI_API_KEY": bool(key and len(key) >= MIN_KEY_LENGTH),
        "keyLength": len(key) if key else 0,
        "note": f"This does not print {API_KEY_ENV}, only whether it exists.",
    }
