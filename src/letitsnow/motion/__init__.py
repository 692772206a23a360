from letitsnow.motion.trajectory import Position as Position
from letitsnow.motion.trajectory import TrajectorySettings as TrajectorySettings
from letitsnow.motion.trajectory import TrajectoryState as TrajectoryState
from letitsnow.motion.trajectory import advance as advance
from letitsnow.motion.trajectory import horizontal_offset as horizontal_offset
from letitsnow.motion.trajectory import initial_state as initial_state
from letitsnow.motion.trajectory import phase as phase
