from enum import Enum


class View(str, Enum):
    CREATE_PROPOSAL = "create_proposal"
    PROPOSALS = "proposals"
