"""Edit distance alignment algorithm for sequence matching."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models.alignment_op import AlignmentOp


def _distance_table(spoken: Sequence[str], correct: Sequence[str]) -> List[List[int]]:
    m, n = len(spoken), len(correct)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if spoken[i - 1] == correct[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j - 1], dp[i - 1][j], dp[i][j - 1])
    return dp


def align(spoken: Sequence[str], correct: Sequence[str]) -> Tuple[AlignmentOp, ...]:
    """Wagner-Fischer word alignment of a spoken transcript to the correct line.

    Backtracking prefers, in order: match, substitution, insertion, deletion,
    so ties always resolve the same way.

      match -> word said correctly
      sub   -> wrong word in place of the correct one
      ins   -> extra spoken word
      del   -> correct word that was not spoken

    Args:
        spoken: Spoken tokens
        correct: Correct-line tokens

    Returns:
        Tuple of AlignmentOp in reading order
    """
    dp = _distance_table(spoken, correct)

    ops: List[AlignmentOp] = []
    i, j = len(spoken), len(correct)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and spoken[i - 1] == correct[j - 1]:
            ops.append(AlignmentOp.match(spoken[i - 1], correct[j - 1]))
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            ops.append(AlignmentOp.substitution(spoken[i - 1], correct[j - 1]))
            i -= 1
            j -= 1
        elif i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            ops.append(AlignmentOp.insertion(spoken[i - 1]))
            i -= 1
        else:
            ops.append(AlignmentOp.deletion(correct[j - 1]))
            j -= 1
    ops.reverse()
    return tuple(ops)


def edit_distance(spoken: Sequence[str], correct: Sequence[str]) -> int:
    """Number of non-match operations in the alignment (word-level Levenshtein)."""
    return sum(1 for op in align(spoken, correct) if not op.is_match)
