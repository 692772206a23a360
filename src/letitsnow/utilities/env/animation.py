from letitsnow.motion.trajectory import (DEFAULT_AMPLITUDE, DEFAULT_BASE_LEFT,
                                         DEFAULT_BASE_TOP, DEFAULT_PERIOD,
                                         DEFAULT_VERTICAL_LIMIT,
                                         DEFAULT_VERTICAL_SPEED,
                                         TrajectorySettings)
from letitsnow.utilities.env.parsing import _env_float, _env_int


class AnimationConfiguration:
    @classmethod
    def base_left(cls) -> float:
        return _env_float("LETITSNOW_BASE_LEFT", default=DEFAULT_BASE_LEFT)

    @classmethod
    def base_top(cls) -> int:
        return _env_int("LETITSNOW_BASE_TOP", default=DEFAULT_BASE_TOP, minimum=0)

    @classmethod
    def amplitude(cls) -> float:
        return _env_float(
            "LETITSNOW_AMPLITUDE", default=DEFAULT_AMPLITUDE, minimum=0.0
        )

    @classmethod
    def period(cls) -> int:
        return _env_int("LETITSNOW_PERIOD", default=DEFAULT_PERIOD, minimum=1)

    @classmethod
    def vertical_limit(cls) -> int:
        return _env_int(
            "LETITSNOW_VERTICAL_LIMIT", default=DEFAULT_VERTICAL_LIMIT, minimum=1
        )

    @classmethod
    def vertical_speed(cls) -> int:
        return _env_int(
            "LETITSNOW_VERTICAL_SPEED", default=DEFAULT_VERTICAL_SPEED, minimum=0
        )

    @classmethod
    def trajectory_settings(cls) -> TrajectorySettings:
        return TrajectorySettings(
            base_left=cls.base_left(),
            base_top=cls.base_top(),
            amplitude=cls.amplitude(),
            period=cls.period(),
            vertical_limit=cls.vertical_limit(),
            vertical_speed=cls.vertical_speed(),
        )
