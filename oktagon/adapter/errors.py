import httpx

from oktagon.libs.result import Error

from .okta_client import OktaClientError, PrivateKeyError

# Everything an Okta call can fail with; converted to an Error at the adapter boundary
OKTA_FAILURES = (httpx.HTTPError, OktaClientError, ValueError, KeyError)


def api_error(action: str, exc: Exception) -> Error:
    """Error for a failed Okta call, keeping the exception as cause"""
    if isinstance(exc, PrivateKeyError):
        return Error(
            "INVALID_CREDENTIALS",
            f"Failed to {action}. Client error. Please check your private key.",
            cause=exc,
        )
    if isinstance(exc, httpx.HTTPStatusError):
        return Error(
            "OKTA_API_ERROR",
            f"Failed to {action}. Okta responded with status [{exc.response.status_code}].",
            cause=exc,
        )
    return Error("OKTA_API_ERROR", f"Failed to {action}.", cause=exc)
