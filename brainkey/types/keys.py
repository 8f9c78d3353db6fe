"""Key, signature and memo value types for brainkey."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

from ..constants import Role, COMPACT_HEADER_RANGE
from ..exceptions import InvalidInputError
from ..types.common import WIF, PublicKeyText, HexStr

__all__ = [
    "KeyPair",
    "AccountKeys",
    "CompactSignature",
    "Memo",
]


@dataclass(frozen=True)
class KeyPair:
    """Private key in WIF with its matching public key text."""

    private_key: WIF
    public_key: PublicKeyText

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key!r})"


@dataclass(frozen=True)
class AccountKeys:
    """Owner, active and memo key pairs of one account."""

    owner: KeyPair
    active: KeyPair
    memo: KeyPair

    def __getitem__(self, role: str) -> KeyPair:
        """Look up a pair by role name or ``Role`` member."""
        if isinstance(role, Role):
            role = role.label
        if role not in ("owner", "active", "memo"):
            raise KeyError(role)
        return getattr(self, role)

    def items(self) -> Iterator[Tuple[str, KeyPair]]:
        for role in Role:
            yield role.label, getattr(self, role.label)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            role: {"privateKey": pair.private_key, "publicKey": pair.public_key}
            for role, pair in self.items()
        }


@dataclass(frozen=True)
class CompactSignature:
    """
    65-byte recoverable signature: header, r and s.

    ``header = 27 + 4 + recovery_id`` for signatures over compressed keys.
    """

    header: int
    r: bytes
    s: bytes

    def __post_init__(self) -> None:
        if len(self.r) != 32 or len(self.s) != 32:
            raise InvalidInputError("Signature r and s must be 32 bytes each")
        if self.header not in COMPACT_HEADER_RANGE:
            raise InvalidInputError(f"Invalid signature header: {self.header}")

    @classmethod
    def from_bytes(cls, data: bytes) -> "CompactSignature":
        if len(data) != 65:
            raise InvalidInputError(f"Compact signature must be 65 bytes, got {len(data)}")
        return cls(header=data[0], r=bytes(data[1:33]), s=bytes(data[33:65]))

    @property
    def recovery_id(self) -> int:
        return (self.header - 27) & 3

    @property
    def r_int(self) -> int:
        return int.from_bytes(self.r, "big")

    @property
    def s_int(self) -> int:
        return int.from_bytes(self.s, "big")

    def hex(self) -> str:
        return bytes(self).hex()

    def __bytes__(self) -> bytes:
        return bytes([self.header]) + self.r + self.s

    def __len__(self) -> int:
        return 65


@dataclass(frozen=True)
class Memo:
    """Encrypted memo as stored on chain."""

    sender: PublicKeyText
    recipient: PublicKeyText
    nonce: int
    message: HexStr

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Memo":
        """Create from the chain form ``{"from", "to", "nonce", "message"}``."""
        try:
            return cls(
                sender=PublicKeyText(data["from"]),
                recipient=PublicKeyText(data["to"]),
                nonce=int(data["nonce"]),
                message=HexStr(data["message"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid memo object: {e}") from e

    def to_dict(self) -> Dict[str, str]:
        """Chain form; the nonce is a decimal string since it can exceed 2^53."""
        return {
            "from": self.sender,
            "to": self.recipient,
            "nonce": str(self.nonce),
            "message": self.message,
        }
