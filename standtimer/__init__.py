"""StandTimer: a stand-up-and-move reminder with an activity log."""

__version__ = "0.1.0"
