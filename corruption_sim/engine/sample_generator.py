import numpy as np
import pandas as pd


def generate_sample(n=1000, mu=1.0, sigma=1.0, seed=853):
    """
    정규분포 N(mu, sigma)에서 n개의 표본을 생성합니다.
    같은 seed + 같은 파라미터 -> 항상 같은 표본 (재현 가능)
    전역 np.random.seed 대신 독립된 Generator를 사용합니다.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"표본 크기 n은 정수여야 합니다. (n={n!r})")
    if n <= 0:
        raise ValueError(f"표본 크기 n은 1 이상이어야 합니다. (n={n})")
    if sigma < 0:
        raise ValueError(f"표준편차 sigma는 음수일 수 없습니다. (sigma={sigma})")

    rng = np.random.default_rng(seed)
    sample = rng.normal(loc=mu, scale=sigma, size=n)

    # 원본 표본은 기준값이므로 수정 불가로 고정
    sample.flags.writeable = False
    return sample


def sample_frame(data, name="value"):
    """표본을 1..n 인덱스를 가진 Series로 변환"""
    values = np.asarray(data, dtype=float)
    return pd.Series(values, index=pd.RangeIndex(1, len(values) + 1), name=name)
