"""Pydantic models for decoded osu! beatmaps.

Every section model is frozen and fully populated: absent keys fall back to
the defaults declared here, so a default value and an explicitly written
default are indistinguishable once decoded.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hoshizora.core.formats.osu.models.enums import (
    Countdown,
    Mode,
    OverlayPosition,
    SampleSet,
)

U32_MAX = 2**32 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


class Format(BaseModel):
    """File format preamble (``osu file format v14``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: int = Field(default=14, ge=0, description="Format version number")


class General(BaseModel):
    """[General] section: audio and gameplay configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    audio_filename: str = Field(default="", description="Audio file, relative to the beatmap")
    audio_lead_in: int = Field(
        default=0, ge=0, le=U32_MAX, description="Silence before the audio starts (ms)"
    )
    audio_hash: str = Field(default="", description="Deprecated audio hash")
    preview_time: int = Field(
        default=-1,
        ge=I32_MIN,
        le=I32_MAX,
        description="Song select preview start (ms); -1 means no preview",
    )
    countdown: Countdown = Countdown.NORMAL
    sample_set: SampleSet = SampleSet.NORMAL
    stack_leniency: float = Field(default=0.7, description="Stacking threshold multiplier")
    mode: Mode = Mode.OSU
    letterbox_in_breaks: bool = False
    story_fire_in_front: bool = True
    use_skin_sprites: bool = False
    always_show_playfield: bool = False
    overlay_position: OverlayPosition = OverlayPosition.NO_CHANGE
    skin_preference: str = ""
    epilepsy_warning: bool = False
    countdown_offset: int = Field(
        default=0, ge=0, le=U32_MAX, description="Beats the countdown is offset by"
    )
    special_style: bool = False
    widescreen_storyboard: bool = False
    samples_match_playback_rate: bool = False


class Editor(BaseModel):
    """[Editor] section. Declared for completeness, not decoded yet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bookmarks: tuple[int, ...] = ()
    distance_spacing: float = 1.0
    beat_divisor: int = 4
    grid_size: int = 4
    timeline_zoom: float = 1.0


class Metadata(BaseModel):
    """[Metadata] section: song and mapset identification."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = ""
    title_unicode: str = ""
    artist: str = ""
    artist_unicode: str = ""
    creator: str = ""
    version: str = Field(default="", description="Difficulty name")
    source: str = ""
    tags: tuple[str, ...] = Field(default=(), description="Search terms, in file order")
    beatmap_id: int = Field(default=0, ge=0, le=U32_MAX)
    beatmap_set_id: int = Field(default=0, ge=0, le=U32_MAX)


class Difficulty(BaseModel):
    """[Difficulty] section."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hp: float = Field(default=5.0, description="HP drain rate")
    cs: float = Field(default=5.0, description="Circle size")
    od: float = Field(default=5.0, description="Overall difficulty")
    ar: float = Field(default=5.0, description="Approach rate")
    slider_multiplier: float = Field(default=1.4, description="Base slider velocity")
    slider_tickrate: float = Field(default=1.0, description="Slider ticks per beat")


class TimingPoint(BaseModel):
    """One entry of [TimingPoints]. Not populated by the decoder yet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    time: int
    beat_length: float
    meter: int = 4
    sample_set: int = 0
    sample_index: int = 0
    volume: int = 100
    uninherited: bool = True
    effects: int = 0


class HitObject(BaseModel):
    """One entry of [HitObjects]. Not populated by the decoder yet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    x: int
    y: int
    time: int
    type: int
    hit_sound: int = 0


class Beatmap(BaseModel):
    """A fully decoded beatmap.

    Example:
        >>> beatmap = Beatmap()
        >>> beatmap.general.preview_time
        -1
        >>> beatmap.difficulty.slider_multiplier
        1.4
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: Format = Field(default_factory=Format)
    general: General = Field(default_factory=General)
    editor: Editor = Field(default_factory=Editor)
    metadata: Metadata = Field(default_factory=Metadata)
    difficulty: Difficulty = Field(default_factory=Difficulty)
    timing_points: tuple[TimingPoint, ...] = ()
    hit_objects: tuple[HitObject, ...] = ()
