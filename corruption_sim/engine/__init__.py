from corruption_sim.engine.sample_generator import generate_sample, sample_frame
from corruption_sim.engine.summary import (
    mean,
    variance,
    skewness,
    count_negatives,
    count_duplicates,
    find_wraparound,
    describe,
    compare_stages,
)
from corruption_sim.engine.simulator import CorruptionSimulator, STAGES
