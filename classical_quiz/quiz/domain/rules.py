"""Pure quiz rules — question generation, answer checking, and score bookkeeping.

Every function here is free of side effects: state goes in as arguments and
comes back as return values. A question is an ordered sequence of sample ids
whose first element is the correct answer; shuffling for display belongs to
the presentation layer.
"""

import random
from collections.abc import Collection, Sequence

from classical_quiz.config.domain.rules import DEFAULT_POOL_SIZE
from classical_quiz.quiz.domain.errors import GameOver, InvalidQuestionError

# Below this many remaining samples there is no wrong-answer option left.
MIN_REMAINING = 2


def generate_question(
    remaining_ids: Collection[int],
    catalog_ids: Collection[int] | None = None,
    pool_size: int = DEFAULT_POOL_SIZE,
    rng: random.Random | None = None,
) -> list[int]:
    """
    Draw a question from the remaining pool.

    The answer is picked uniformly from remaining_ids. Up to pool_size - 1
    distractors are then sampled without replacement from catalog_ids (or from
    remaining_ids when no catalog is given). A catalog smaller than pool_size
    yields as many options as it has.

    Raises:
        GameOver: if fewer than two ids remain.
        ValueError: if pool_size is below two.
    """
    if pool_size < MIN_REMAINING:
        raise ValueError(f"pool_size must be at least {MIN_REMAINING}, got {pool_size}")
    if len(remaining_ids) < MIN_REMAINING:
        raise GameOver(remaining=len(remaining_ids))

    rng = rng or random.Random()
    # Sorted so that a seeded rng gives reproducible draws regardless of set order.
    answer_id = rng.choice(sorted(remaining_ids))

    source = set(remaining_ids) if catalog_ids is None else set(catalog_ids)
    source.update(remaining_ids)
    candidates = sorted(source - {answer_id})
    distractors = rng.sample(candidates, min(pool_size - 1, len(candidates)))

    return [answer_id, *distractors]


def correct_answer_id(question: Sequence[int]) -> int:
    """
    Return the correct answer of a question: its first element.

    Raises:
        InvalidQuestionError: if the question is empty.
    """
    if not question:
        raise InvalidQuestionError(reason="question has no options")
    return question[0]


def is_correct(answer_id: int, chosen_id: int) -> bool:
    return answer_id == chosen_id


def advance_round(remaining_ids: Collection[int], answered_id: int) -> frozenset[int]:
    """Remove the round's answer id from the pool. Absent ids are a no-op."""
    return frozenset(remaining_ids) - {answered_id}


def record_score(current_score: int, was_correct: bool) -> int:
    return current_score + 1 if was_correct else current_score


def update_high_score(current_score: int, high_score: int) -> int:
    return max(current_score, high_score)


def is_finished(remaining_ids: Collection[int]) -> bool:
    return len(remaining_ids) < MIN_REMAINING
