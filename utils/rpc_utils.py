from typing import Any, Dict, Optional, Tuple

# https://eips.ethereum.org/EIPS/eip-1193#provider-errors
USER_REJECTED_REQUEST = 4001
UNAUTHORIZED = 4100

# https://www.jsonrpc.org/specification#error_object
JSON_RPC_METHOD_NOT_FOUND = -32601


def rpc_response_error(response: Any) -> Optional[Dict[str, Any]]:
    """
    Returns the `error` object of a raw JSON-RPC response, if any.
    """
    if not isinstance(response, dict):
        return None
    error = response.get("error")
    if error is None:
        return None
    if isinstance(error, dict):
        return error
    return {"code": None, "message": str(error)}


def extract_rpc_error(exc: BaseException) -> Tuple[Optional[int], str]:
    """
    Pulls the JSON-RPC error code and the most specific message out of a web3 exception.
    Web3RPCError keeps the raw response on `rpc_response`; ContractLogicError carries
    the decoded revert reason on `message`.
    """
    code = None
    message = None

    error = rpc_response_error(getattr(exc, "rpc_response", None))
    if error is not None:
        code = error.get("code")
        message = error.get("message")

    exc_message = getattr(exc, "message", None)
    if isinstance(exc_message, str) and exc_message:
        message = message or exc_message
        # Revert reasons are more useful than the generic RPC wrapper text
        if "revert" in exc_message.lower():
            message = exc_message

    if not message:
        message = str(exc) or type(exc).__name__
    return code, message


def is_user_rejection(exc: BaseException) -> bool:
    code, _ = extract_rpc_error(exc)
    return code == USER_REJECTED_REQUEST
