# Deployed contracts of the membership DAO on Polygon Mumbai.
# Overridable through GOVERNANCE_CONTRACT_ADDRESS / MEMBERSHIP_CONTRACT_ADDRESS.

# Governance contract, also holds the DAO treasury
DAO_GOVERNANCE_CONTRACT_ADDRESS = "0x6ae5e7c9be2fd5e0ed4c2ba27c0e4e01a5b1c8d4"

# ERC721 membership collection, holders are eligible to propose and vote
MEMBERSHIP_NFT_CONTRACT_ADDRESS = "0x3f1b0e8c6a0ca2f4d7e1bb9f5a1d0f2c7e4a9b63"

# Polygon Mumbai testnet
REQUIRED_CHAIN_ID = 0x13881
REQUIRED_CHAIN_NAME = "Polygon Mumbai"
