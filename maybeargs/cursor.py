"""
maybeargs token cursor: the single source of forward movement over the tokens.

What this module provides
- TokenCursor: owns an immutable tuple of tokens, a read position, the history
  of takes (so each one can be undone) and the set of indices claimed by
  persistent scans.
- CursorError: raised on programming errors (unpaired backtrack, bad claims).

Movement model
- position is the index of the next token to read, always within [0, len(tokens)].
- take() skips claimed indices, returns the token and moves past it. Reading
  beyond the end returns None; it is never an error.
- backtrack() undoes exactly one take(), restoring the position that take()
  started from, even when the take skipped over claimed indices.
- checkpoint()/rewind() bookmark the take history and undo back to it.

Claims
- claim(range) marks indices as already accounted for; take() and peek() skip
  them transparently. Claims are monotonic: nothing is ever un-claimed.

Example
    >>> cursor = TokenCursor(("run", "--verbose", "file"))
    >>> cursor.claim(range(1, 2))
    >>> cursor.take(), cursor.take(), cursor.take()
    ('run', 'file', None)
"""
from collections.abc import Iterable

from .utils import mirror


class CursorError(RuntimeError):
    """
    misuse of the cursor protocol (a programming error, not a user-input fault).
    """


class TokenCursor:
    """
    Read position over a fixed token sequence with single-step backtracking.

    Properties
    - tokens: tuple[str, ...] (read-only)
    - position: int (read-only; move it with take/backtrack/rewind)
    - claimed: frozenset[int] (read-only view of claimed indices)
    """
    __slots__ = ("_tokens", "_position", "_claimed", "_history")

    tokens = mirror("tokens")
    claimed = mirror("claimed")

    def __init__(self, tokens, /):
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("TokenCursor() argument must be an iterable of strings")
        tokens = tuple(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("TokenCursor() argument must be an iterable of strings")
        self._tokens = tokens
        self._position = 0
        self._claimed = set()
        self._history = []

    @property
    def position(self):
        return self._position

    def _skip(self, index):
        # first unclaimed index at or after `index`
        while index in self._claimed:
            index += 1
        return index

    def peek(self):
        """
        Return the token the next take() would return, without consuming it.

        Returns None when no unclaimed token remains.
        """
        index = self._skip(self._position)
        if index >= len(self._tokens):
            return None
        return self._tokens[index]

    def take(self):
        """
        Consume and return the next unclaimed token, or None when exhausted.

        Every call is recorded (including the exhausted ones) so that it can be
        paired with exactly one backtrack().
        """
        self._history.append(self._position)
        index = self._skip(self._position)
        if index >= len(self._tokens):
            self._position = len(self._tokens)
            return None
        self._position = index + 1
        return self._tokens[index]

    def backtrack(self):
        """
        Undo the most recent take() that has not been undone yet.

        Raises
        - CursorError: when there is no take() left to undo.
        """
        try:
            self._position = self._history.pop()
        except IndexError:
            raise CursorError("backtrack() without a matching take()") from None

    def checkpoint(self):
        """
        Bookmark the current take history; pass the result to rewind().
        """
        return len(self._history)

    def rewind(self, checkpoint, /):
        """
        Backtrack every take() made since `checkpoint` was recorded.
        """
        if not isinstance(checkpoint, int) or isinstance(checkpoint, bool):
            raise TypeError("rewind() argument must be an integer")
        if checkpoint < 0 or checkpoint > len(self._history):
            raise CursorError("rewind() checkpoint %d is not reachable" % checkpoint)
        while len(self._history) > checkpoint:
            self.backtrack()

    def claim(self, indices, /):
        """
        Mark a contiguous range of token indices as claimed.

        Indices that are already claimed are kept as they are; the claim set
        only grows.

        Raises
        - TypeError: when `indices` is not a range with step 1.
        - CursorError: when the range leaves the token sequence.
        """
        if not isinstance(indices, range) or indices.step != 1:
            raise TypeError("claim() argument must be a contiguous range")
        if indices and (indices.start < 0 or indices.stop > len(self._tokens)):
            raise CursorError("claim() range %r is out of bounds" % (indices,))
        self._claimed.update(index for index in indices if index not in self._claimed)

    def __len__(self):
        return len(self._tokens)

    def __repr__(self):
        return "TokenCursor(tokens=%r, position=%d, claimed=%r)" % (
            self._tokens, self._position, sorted(self._claimed)
        )


__all__ = (
    "CursorError",
    "TokenCursor",
)
