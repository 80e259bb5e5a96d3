import pandas as pd
import numpy as np
import matplotlib.pyplot as plt

from corruption_sim.engine.sample_generator import generate_sample
from corruption_sim.engine.summary import compare_stages
from corruption_sim.corruptions.data_errors import overwrite_corrupt, flip_negatives, shift_decimals

# 기본 시나리오 설정
DEFAULT_N = 1000
DEFAULT_MU = 1.0
DEFAULT_SIGMA = 1.0
DEFAULT_SEED = 853
DEFAULT_CAPACITY = 900
DEFAULT_SHIFT_LOW = 1.0
DEFAULT_SHIFT_HIGH = 1.1
DEFAULT_SHIFT_FACTOR = 0.1

STAGES = ['original', 'overwritten', 'sign_flipped', 'decimal_shifted']
STAGE_TITLES = {
    'original': 'Original Sample',
    'overwritten': 'Instrument Overflow (Overwrite)',
    'sign_flipped': 'Negatives Flipped',
    'decimal_shifted': 'Decimal Shift [1.0, 1.1]',
}


class CorruptionSimulator:
    def __init__(self, n=DEFAULT_N, mu=DEFAULT_MU, sigma=DEFAULT_SIGMA, seed=DEFAULT_SEED,
                 capacity=DEFAULT_CAPACITY, flip_seed=None,
                 shift_low=DEFAULT_SHIFT_LOW, shift_high=DEFAULT_SHIFT_HIGH, shift_factor=DEFAULT_SHIFT_FACTOR):
        # 잘못된 설정은 단계 실행 전에 바로 실패
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
            raise ValueError(f"표본 크기 n은 1 이상의 정수여야 합니다. (n={n!r})")
        if sigma < 0:
            raise ValueError(f"표준편차 sigma는 음수일 수 없습니다. (sigma={sigma})")
        if capacity <= 0 or capacity >= n:
            raise ValueError(f"capacity는 0보다 크고 표본 크기보다 작아야 합니다. (capacity={capacity}, n={n})")
        if shift_low > shift_high:
            raise ValueError(f"범위가 잘못되었습니다. low는 high보다 클 수 없습니다. (low={shift_low}, high={shift_high})")

        self.n = n
        self.mu = mu
        self.sigma = sigma
        self.seed = seed
        self.capacity = capacity
        self.flip_seed = seed if flip_seed is None else flip_seed
        self.shift_low = shift_low
        self.shift_high = shift_high
        self.shift_factor = shift_factor

        self.stage = None
        self.sample = None
        self.frame = None
        self.flipped_idx = None
        self.results_df = None

    def run(self):
        """원본 생성 -> 덮어쓰기 -> 부호 반전 -> 소수점 밀림 (순서 고정)"""
        print(f"[Simulation] 시작: n={self.n}, N({self.mu}, {self.sigma}), seed={self.seed}")

        self.sample = generate_sample(self.n, self.mu, self.sigma, self.seed)
        self.stage = 'generated'
        print(f"[Data] 원본 표본 생성 완료. (Rows: {len(self.sample)})")

        overwritten = overwrite_corrupt(self.sample, self.capacity)
        self.stage = 'overwritten'
        print(f"[Simulation] 1) 덮어쓰기: {self.capacity + 1}~{self.n}번 값 <- 1~{self.n - self.capacity}번 값")

        sign_flipped, self.flipped_idx = flip_negatives(overwritten, self.flip_seed, return_indices=True)
        self.stage = 'sign_flipped'
        print(f"[Simulation] 2) 부호 반전: 음수 {len(self.flipped_idx)}개 -> 양수")

        decimal_shifted = shift_decimals(sign_flipped, self.shift_low, self.shift_high, self.shift_factor)
        self.stage = 'decimal_shifted'
        n_shifted = int(np.sum(decimal_shifted != sign_flipped))
        print(f"[Simulation] 3) 소수점 밀림: [{self.shift_low}, {self.shift_high}] 구간 {n_shifted}개 x{self.shift_factor}")

        self.frame = pd.DataFrame({
            'original': self.sample,
            'overwritten': overwritten,
            'sign_flipped': sign_flipped,
            'decimal_shifted': decimal_shifted,
        }, index=pd.RangeIndex(1, self.n + 1))

        print("[Simulation] 완료!")
        return self.frame

    def analyze(self, show=True):
        """단계별 통계 비교 리포트"""
        if self.frame is None:
            print("시뮬레이션을 먼저 실행해주세요. (run)")
            return None

        self.results_df = compare_stages(self.frame)
        self.stage = 'reported'

        if show:
            print(f"\n{'='*78}")
            print(f" [Report] 데이터 오염 단계별 비교 (n={self.n})")
            print(f"{'='*78}")
            print(f"{'Stage':<16} | {'Mean':>8} | {'Diff':>8} | {'Std':>7} | {'Skew':>7} | {'Neg':>5} | {'Dup':>5}")
            print(f"{'-'*78}")
            for stage, row in self.results_df.iterrows():
                print(f"{stage:<16} | {row['mean']:>8.4f} | {row['mean_diff']:>+8.4f} | {row['std']:>7.4f} | "
                      f"{row['skew']:>+7.3f} | {int(row['negatives']):>5d} | {int(row['duplicates']):>5d}")
            print(f"{'='*78}")

        return self.results_df

    def plot_distributions(self, show=True, bins=40):
        """단계별 히스토그램 (2x2), 빨간 점선 = 평균"""
        if self.frame is None:
            print("시뮬레이션을 먼저 실행해주세요. (run)")
            return None

        # 모든 단계를 같은 구간으로 그려야 비교가 됨
        edges = np.histogram_bin_edges(self.frame.to_numpy().ravel(), bins=bins)

        fig, axes = plt.subplots(2, 2, figsize=(12, 8), sharex=True)
        for ax, stage in zip(axes.ravel(), STAGES):
            values = self.frame[stage]
            ax.hist(values, bins=edges, color='steelblue', alpha=0.7, edgecolor='white')
            ax.axvline(values.mean(), color='red', linestyle='--', linewidth=1.5,
                       label=f"mean={values.mean():.3f}")
            ax.set_title(STAGE_TITLES[stage])
            ax.legend()
            ax.grid(True, alpha=0.3)

        fig.tight_layout()
        if show:
            plt.show()
        return fig
