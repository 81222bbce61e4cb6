"""Line-clear points, level and gravity"""

SCORE_TABLE = [0, 40, 100, 300, 1200]
LINES_PER_LEVEL = 10


def score_for(lines: int, level: int) -> int:
    return SCORE_TABLE[lines] * level


def level_for(first_score: int, second_score: int) -> int:
    # Lines are approximated from the combined score, not counted.
    total_lines = (first_score + second_score) // 100
    return total_lines // LINES_PER_LEVEL + 1


def drop_interval_ms(level: int) -> int:
    return max(100, 1000 - (level - 1) * 50)
