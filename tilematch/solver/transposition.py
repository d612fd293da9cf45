"""
Transposition Index Module - Dominance pruning for revisited board/tray states.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class TranspositionEntry:
    """
    Best visit recorded for one signature.

    Attributes:
        score: Cumulative score of the recorded visit
        tray_len: Tray length of the recorded visit
    """
    score: int
    tray_len: int

    def dominates(self, score: int, tray_len: int) -> bool:
        """True when this entry is at least as good on both axes."""
        return self.score >= score and self.tray_len <= tray_len


class TranspositionIndex:
    """
    Map from node signature to the best visit seen for it.

    Scoped to a single solve call; entries are overwritten but never
    evicted.
    """

    def __init__(self):
        self._entries: Dict[bytes, TranspositionEntry] = {}

    def lookup(self, signature: bytes) -> Optional[TranspositionEntry]:
        """
        Get the recorded entry for a signature.

        Args:
            signature: Node signature

        Returns:
            TranspositionEntry, or None if never recorded
        """
        return self._entries.get(signature)

    def record(self, signature: bytes, score: int, tray_len: int) -> None:
        """Store (score, tray_len) as the entry for signature."""
        self._entries[signature] = TranspositionEntry(score=score, tray_len=tray_len)

    def admit(self, signature: bytes, score: int, tray_len: int) -> bool:
        """
        Decide whether a candidate survives and record it if so.

        A candidate is rejected when the existing entry for its signature
        has score >= and tray length <= the candidate's. Otherwise the
        entry is replaced by the candidate.

        Args:
            signature: Candidate node signature
            score: Candidate cumulative score
            tray_len: Candidate resolved tray length

        Returns:
            True if the candidate should be kept
        """
        entry = self._entries.get(signature)
        if entry is not None and entry.dominates(score, tray_len):
            return False
        self.record(signature, score, tray_len)
        return True

    def __contains__(self, signature: bytes) -> bool:
        return signature in self._entries

    def __len__(self) -> int:
        return len(self._entries)
