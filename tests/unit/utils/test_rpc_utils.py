from web3.exceptions import ContractLogicError, Web3RPCError

from utils.rpc_utils import extract_rpc_error, is_user_rejection, rpc_response_error


def test_rpc_response_error():
    assert rpc_response_error({"result": "0x1"}) is None
    assert rpc_response_error({"error": {"code": -32000, "message": "boom"}}) == {"code": -32000, "message": "boom"}
    assert rpc_response_error({"error": "plain"}) == {"code": None, "message": "plain"}
    assert rpc_response_error(None) is None


def test_extract_from_rpc_response():
    exc = Web3RPCError(
        "node error",
        rpc_response={"jsonrpc": "2.0", "id": 1, "error": {"code": 4001, "message": "User rejected the request."}},
    )

    assert extract_rpc_error(exc) == (4001, "User rejected the request.")
    assert is_user_rejection(exc)


def test_revert_reason_wins():
    exc = ContractLogicError("execution reverted: DEADLINE_EXCEEDED")

    code, message = extract_rpc_error(exc)

    assert message == "execution reverted: DEADLINE_EXCEEDED"
    assert not is_user_rejection(exc)


def test_plain_exception():
    assert extract_rpc_error(ConnectionError("refused")) == (None, "refused")
