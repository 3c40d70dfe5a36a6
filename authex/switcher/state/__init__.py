from authex.switcher.state.interfaces import ISwitchState
from authex.switcher.state.state import SwitchState

__all__ = ["ISwitchState", "SwitchState"]
