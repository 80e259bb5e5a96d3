"""정규분포 표본에 데이터 오염 시나리오 3가지를 적용하고 원본과 비교하는 시뮬레이션"""
from corruption_sim.engine.sample_generator import generate_sample, sample_frame
from corruption_sim.engine.summary import mean, describe, compare_stages
from corruption_sim.engine.simulator import CorruptionSimulator
from corruption_sim.corruptions.data_errors import overwrite_corrupt, flip_negatives, shift_decimals

__version__ = "0.1.0"

__all__ = [
    "generate_sample",
    "sample_frame",
    "overwrite_corrupt",
    "flip_negatives",
    "shift_decimals",
    "mean",
    "describe",
    "compare_stages",
    "CorruptionSimulator",
]
