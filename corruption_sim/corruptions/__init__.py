from corruption_sim.corruptions.data_errors import flip_negatives, overwrite_corrupt, shift_decimals

__all__ = ["overwrite_corrupt", "flip_negatives", "shift_decimals"]
