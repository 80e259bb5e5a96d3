import numpy as np

# -----------------------------------------------------------------------------
# 1. Overwrite (측정 장비 메모리 초과 -> 앞부분 데이터로 덮어쓰기)
# -----------------------------------------------------------------------------
def overwrite_corrupt(data, capacity=900):
    """
    용량(capacity)을 넘긴 기록이 처음부터 다시 덮어써지는 상황을 재현합니다.
    - capacity+1 번째 값 = 1번째 값, capacity+2 번째 값 = 2번째 값 ...
    - 넘친 구간이 capacity보다 길면 앞부분을 순환(cycle)해서 채움
    """
    corrupted = np.array(data, dtype=float)
    n = len(corrupted)

    if capacity <= 0 or capacity >= n:
        raise ValueError(f"capacity는 0보다 크고 표본 크기보다 작아야 합니다. (capacity={capacity}, n={n})")

    overflow = n - capacity
    source_idx = np.arange(overflow) % capacity
    corrupted[capacity:] = corrupted[source_idx]
    return corrupted


# -----------------------------------------------------------------------------
# 2. Sign-Flip (데이터 정리 중 음수 절반이 양수로 바뀜)
# -----------------------------------------------------------------------------
def flip_negatives(data, seed=853, return_indices=False):
    """
    음수 값 중 floor(개수/2)개를 무작위로 골라 절댓값으로 바꿉니다.
    홀수 개일 때는 내림 (반올림하지 않음)
    """
    corrupted = np.array(data, dtype=float)

    negative_idx = np.flatnonzero(corrupted < 0)
    n_flip = len(negative_idx) // 2

    rng = np.random.default_rng(seed)
    flipped_idx = np.sort(rng.choice(negative_idx, size=n_flip, replace=False))
    corrupted[flipped_idx] = np.abs(corrupted[flipped_idx])

    if return_indices:
        return corrupted, flipped_idx
    return corrupted


# -----------------------------------------------------------------------------
# 3. Decimal-Shift (소수점 한 자리 밀림: 1.05 -> 0.105)
# -----------------------------------------------------------------------------
def shift_decimals(data, low=1.0, high=1.1, factor=0.1):
    """
    low <= 값 <= high 인 값에 factor를 곱합니다. (양 끝 포함)
    [주의] 부동소수점 경계값은 epsilon 없이 그대로 비교합니다.
    1.1 근처 값은 표현 오차 때문에 포함/제외가 갈릴 수 있음.
    """
    if low > high:
        raise ValueError(f"범위가 잘못되었습니다. low는 high보다 클 수 없습니다. (low={low}, high={high})")

    corrupted = np.array(data, dtype=float)

    # 변환 전에 대상 인덱스를 먼저 고정
    in_range = (corrupted >= low) & (corrupted <= high)
    corrupted[in_range] = corrupted[in_range] * factor
    return corrupted
