# --- DAO GOVERNANCE (NFT-gated treasury DAO) ---
# proposals(uint256) returns the public struct getter tuple:
# (nftTokenId, deadline, yayVotes, nayVotes, executed)
DAO_GOVERNANCE_ABI = [
    {
        "inputs": [],
        "name": "numProposals",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "name": "proposals",
        "outputs": [
            {"internalType": "uint256", "name": "nftTokenId", "type": "uint256"},
            {"internalType": "uint256", "name": "deadline", "type": "uint256"},
            {"internalType": "uint256", "name": "yayVotes", "type": "uint256"},
            {"internalType": "uint256", "name": "nayVotes", "type": "uint256"},
            {"internalType": "bool", "name": "executed", "type": "bool"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "_nftTokenId", "type": "uint256"}],
        "name": "createProposal",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        # Vote enum: 0 = YAY, 1 = NAY
        "inputs": [
            {"internalType": "uint256", "name": "proposalIndex", "type": "uint256"},
            {"internalType": "enum DAO.Vote", "name": "vote", "type": "uint8"}
        ],
        "name": "voteOnProposal",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "proposalIndex", "type": "uint256"}],
        "name": "executeProposal",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
