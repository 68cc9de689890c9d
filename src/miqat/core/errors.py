from __future__ import annotations

from typing import Optional


class MiqatError(Exception):
    """Base error."""


class InvalidInputError(MiqatError, ValueError):
    """Raised for a malformed date, bad coordinates or bad method parameters."""


class UndefinedHourAngleError(MiqatError, ArithmeticError):
    """
    The sun never reaches the requested altitude on this date at this latitude.

    Carries the inputs of the hour-angle equation so callers can tell which
    threshold failed (polar day/night, or twilight that never ends).
    """

    def __init__(
        self,
        latitude: float,
        declination: float,
        altitude: float,
        cos_value: float,
        event: Optional[str] = None,
    ) -> None:
        self.latitude = latitude
        self.declination = declination
        self.altitude = altitude
        self.cos_value = cos_value
        self.event = event
        what = f"{event} " if event else ""
        super().__init__(
            f"{what}hour angle undefined: sun never reaches {altitude:.3f} deg "
            f"at latitude {latitude:.4f} (cos H = {cos_value:.6f})"
        )

    def for_event(self, event: str) -> "UndefinedHourAngleError":
        """Same failure, labelled with the prayer it was computed for."""
        return UndefinedHourAngleError(
            self.latitude, self.declination, self.altitude, self.cos_value, event=event
        )
