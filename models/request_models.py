"""
API Request Models

Pydantic models for API request validation.
"""
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# ARGB integer or "#RRGGBB" / "#AARRGGBB" / "0x..." string
ColorValue = Union[int, str]


class ClockStyleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    clock_face_background_color: Optional[ColorValue] = Field(None, alias="clockFaceBackgroundColor")
    border_color: Optional[ColorValue] = Field(None, alias="borderColor")
    number_color: Optional[ColorValue] = Field(None, alias="numberColor")
    dot_color: Optional[ColorValue] = Field(None, alias="dotColor")
    hour_hand_color: Optional[ColorValue] = Field(None, alias="hourHandColor")
    minute_hand_color: Optional[ColorValue] = Field(None, alias="minuteHandColor")
    second_hand_color: Optional[ColorValue] = Field(None, alias="secondHandColor")


class ClockResizeRequest(BaseModel):
    width: int = Field(..., ge=0, le=8192)
    height: int = Field(..., ge=0, le=8192)


class ClockPresetRequest(BaseModel):
    preset: str  # "default", "big" or "colorful"


class ClockStateRequest(BaseModel):
    state: Dict[str, Any]  # snapshot as returned by GET /clock/state
