from .chain import ShotChain, carry_between, record_shot

__all__ = ["ShotChain", "carry_between", "record_shot"]
