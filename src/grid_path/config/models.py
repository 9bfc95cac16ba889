from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 100


class GridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width: int
    height: int
    cell_size: float = 1.0
    origin: tuple[float, float] = (0.0, 0.0)

    @field_validator("width", "height", "cell_size")
    def _positive(cls, v, info: ValidationInfo):
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


# ----------------- OBSTACLES ---------------------


class ObstaclesListModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["list"] = "list"
    cells: list[tuple[int, int]] = Field(default_factory=list)


class ObstaclesRandomModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["random"] = "random"
    density: float = 0.2
    seed: int = 123
    keep_endpoints: bool = True

    @field_validator("density")
    @classmethod
    def _density(cls, v: float) -> float:
        if not 0.0 <= v < 1.0:
            raise ValueError("density must be in [0, 1)")
        return v


ObstaclesUnion = Annotated[
    ObstaclesListModel | ObstaclesRandomModel,
    Field(discriminator="kind"),
]

# ----------------- SEARCH ---------------------


class SearchSingleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["single"] = "single"
    iteration_budget: int = Field(default=1000, ge=0)
    h_weight: float = 1.0
    parent_weight: float = 0.5


class SearchDualModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dual"] = "dual"
    iteration_budget: int = Field(default=500, ge=0)  # per engine
    h_weight: float = 1.0
    parent_weight: float = 0.5
    executor: Literal["thread", "process"] = "thread"


SearchUnion = Annotated[SearchSingleModel | SearchDualModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    grid: GridModel
    start: tuple[int, int]
    goal: tuple[int, int]
    obstacles: ObstaclesUnion = Field(default_factory=ObstaclesListModel)
    search: SearchUnion = Field(default_factory=SearchSingleModel)
    log: LogModel = LogModel()

    @model_validator(mode="after")
    def _endpoints_on_grid(self):
        for label, (x, y) in (("start", self.start), ("goal", self.goal)):
            if not (0 <= x < self.grid.width and 0 <= y < self.grid.height):
                raise ValueError(
                    f"{label} {(x, y)} is outside the {self.grid.width}x{self.grid.height} grid"
                )
        return self
