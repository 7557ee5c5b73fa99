from web3 import AsyncWeb3


class SessionAccessor(object):
    """Capability handle bound to one wallet session."""

    is_signer = False

    def __init__(self, w3: AsyncWeb3):
        self.w3 = w3


class ReadOnlyAccessor(SessionAccessor):
    def __repr__(self):
        return "ReadOnlyAccessor()"


class SigningAccessor(SessionAccessor):
    """Signs through the wallet on behalf of exactly one address."""

    is_signer = True

    def __init__(self, w3: AsyncWeb3, address: str):
        super().__init__(w3)
        self.address = address

    def __repr__(self):
        return f"SigningAccessor(address={self.address})"
