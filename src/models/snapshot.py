"""Scene snapshot format used to replay a node graph outside the host."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class NodeRecord(BaseModel):
    """A single node as captured from the host."""

    path: str = Field(..., min_length=1, description="Full node path, e.g. 'Top/Peg1'")
    type: str = Field(..., min_length=1, description="Host node type tag, e.g. 'PEG'")
    timeline_index: Optional[int] = Field(
        None, description="Layer index in the default display's timeline"
    )


class SceneSnapshot(BaseModel):
    """A captured node graph with selection and timeline ordering.

    Attributes:
        nodes: Nodes in host enumeration order
        selection: Selected node paths in selection order
        default_display: Path of the default display node ("" for none)
        timelines: Per-display layer indices, keyed by display path then node path
    """

    nodes: List[NodeRecord] = Field(default_factory=list)
    selection: List[str] = Field(default_factory=list)
    default_display: str = Field("", description="Path of the default display node")
    timelines: Dict[str, Dict[str, int]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_unique_paths(self) -> "SceneSnapshot":
        seen = set()
        for record in self.nodes:
            if record.path in seen:
                raise ValueError(f"Duplicate node path in snapshot: {record.path}")
            seen.add(record.path)
        return self
