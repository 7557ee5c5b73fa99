from enum import IntEnum


class VoteChoice(IntEnum):
    # Wire values of the governance contract's Vote enum
    YAY = 0
    NAY = 1

    @classmethod
    def from_label(cls, label: str) -> "VoteChoice":
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown vote choice {label!r}. Supported: yay, nay") from None
