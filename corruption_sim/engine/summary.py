import numpy as np
import pandas as pd
from scipy.stats import skew


def _values(data):
    values = np.asarray(data, dtype=float)
    if values.size == 0:
        raise ValueError("빈 데이터로는 통계량을 계산할 수 없습니다.")
    return values


def mean(data):
    """산술 평균"""
    return float(np.mean(_values(data)))


def variance(data, ddof=1):
    """
    분산 (기본값: 표본분산, n-1로 나눔)
    ddof=0 이면 모분산 (n으로 나눔)
    """
    values = _values(data)
    if values.size <= ddof:
        return float("nan")
    return float(np.var(values, ddof=ddof))


def skewness(data):
    """왜도: 0이면 대칭, 양수면 오른쪽 꼬리가 김"""
    return float(skew(_values(data)))


def count_negatives(data):
    return int(np.sum(_values(data) < 0))


def count_duplicates(data):
    """첫 등장 이후 정확히 같은 값이 다시 나온 개수 (덮어쓰기 흔적)"""
    return int(pd.Series(_values(data)).duplicated(keep="first").sum())


def find_wraparound(data, min_run=2):
    """
    끝부분 k개가 앞부분 k개와 완전히 같은 가장 긴 k를 찾습니다.
    장비 용량 초과로 앞 데이터가 뒤에 다시 기록된 경우 k = n - capacity
    흔적이 없으면 0
    """
    values = _values(data)
    n = len(values)
    for k in range(n - 1, min_run - 1, -1):
        if np.array_equal(values[n - k:], values[:k]):
            return k
    return 0


def describe(data):
    """단계별 비교용 기술통계 요약"""
    values = _values(data)
    return pd.Series({
        'n': len(values),
        'mean': mean(values),
        'var': variance(values),
        'std': np.sqrt(variance(values)),
        'skew': skewness(values),
        'min': float(values.min()),
        'max': float(values.max()),
        'negatives': count_negatives(values),
        'duplicates': count_duplicates(values),
    })


def compare_stages(frame: pd.DataFrame) -> pd.DataFrame:
    """
    컬럼(단계)별 기술통계를 한 표로 정리합니다.
    mean_diff: 첫 번째 단계(원본) 대비 평균 변화량
    """
    if frame.empty or len(frame.columns) == 0:
        raise ValueError("비교할 단계가 없습니다.")

    table = pd.DataFrame({stage: describe(frame[stage]) for stage in frame.columns}).T
    table['mean_diff'] = table['mean'] - table['mean'].iloc[0]
    for col in ['n', 'negatives', 'duplicates']:
        table[col] = table[col].astype(int)
    return table
