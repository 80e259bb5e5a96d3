import warnings
import matplotlib.pyplot as plt

from corruption_sim.engine.simulator import CorruptionSimulator

warnings.filterwarnings('ignore')

plt.rcParams['axes.unicode_minus'] = False


def main():
    print("=== 데이터 오염 시뮬레이션 (Overwrite + Sign-Flip + Decimal-Shift) ===")

    # 1. 시나리오 설정: N(1, 1)에서 1000개, 장비 용량 900개
    simulator = CorruptionSimulator(n=1000, mu=1.0, sigma=1.0, seed=853, capacity=900)

    # 2. 단계별 오염 적용
    print("\n[Step 1] 오염 단계 실행 중...")
    simulator.run()

    # 3. 수치 비교
    print("\n[Step 2] 단계별 통계 비교")
    results = simulator.analyze()

    baseline = results.loc['original', 'mean']
    final = results.loc['decimal_shifted', 'mean']
    print(f"\n-> 원본 평균 {baseline:.4f} -> 최종 평균 {final:.4f} ({final - baseline:+.4f})")
    print("* 덮어쓰기는 평균을 거의 바꾸지 않지만, 중복값(Dup)으로 흔적이 남습니다.")
    print("* 부호 반전은 왼쪽 꼬리를 줄여 평균을 끌어올립니다.")

    # 4. 시각화
    print("\n[Step 3] 히스토그램 출력")
    simulator.plot_distributions()


if __name__ == "__main__":
    main()
