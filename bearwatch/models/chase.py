"""
Pydantic v2 models for chase-game tuning.

One parameterized configuration covers every variant of the chase game;
variants differ only in the values below (see the pacing presets in the
game's config module).
"""

from pydantic import BaseModel, Field

from bearwatch.models.primitives import Extent


class ChaseConfig(BaseModel):
    """
    Tuning for the avatar/guardian interaction loop.

    Distances are in playfield pixels, speeds in pixels per tick.
    """
    model_config = {"frozen": True}

    avatar_ease: float = Field(
        default=0.2,
        description="Fraction of the remaining distance to the pointer covered each tick",
        gt=0.0,
        le=1.0,
    )
    guardian_speed: float = Field(
        default=30.0,
        description="Constant guardian step length per tick",
        gt=0.0,
    )
    chase_radius: float = Field(
        default=200.0,
        description="A target is selected when the avatar is closer than this",
        gt=0.0,
    )
    catch_radius: float = Field(
        default=80.0,
        description="Capture holds when the guardian is closer than this to the selected target",
        gt=0.0,
    )
    flash_duration_ms: int = Field(
        default=200,
        description="Length of the full-screen flash on capture (0 = no flash)",
        ge=0,
    )
    target_count: int = Field(
        default=5,
        description="Number of targets laid out across the playfield",
        ge=1,
    )
    avatar_size: Extent = Field(
        default=Extent(width=90, height=70),
        description="Visual footprint of the avatar",
    )
    guardian_size: Extent = Field(
        default=Extent(width=225, height=180),
        description="Visual footprint of the guardian",
    )
    target_size: Extent = Field(
        default=Extent(width=80, height=50),
        description="Visual footprint of a target",
    )
    alert_button_margin: float = Field(
        default=20.0,
        description="Gap between the guardian's top edge and the alert button centre",
        ge=0.0,
    )

    @property
    def flash_duration(self) -> float:
        """Flash duration in seconds."""
        return self.flash_duration_ms / 1000.0

    @property
    def home_separation(self) -> float:
        """Minimum distance between the guardian's home and any target."""
        return self.target_size.width * 2.0
