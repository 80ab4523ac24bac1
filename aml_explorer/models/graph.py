"""Address-transaction graph models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from aml_explorer.constants import EdgeColor, NodeColor


class GraphNode(BaseModel):
    """A Bitcoin address in the graph."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    visual_class: NodeColor = Field(alias="visualClass")


class GraphEdge(BaseModel):
    """Flow from a transaction's source address to one of its outputs."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_address: str = Field(alias="from")
    to_address: str = Field(alias="to")
    tx_id: str = Field(alias="txId")
    visual_class: EdgeColor = Field(alias="visualClass")


class GraphResult(BaseModel):
    """Complete node/edge graph of a dataset folder."""

    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)

    def to_anychart(self) -> dict[str, Any]:
        """Render-ready shape consumed by the AnyChart network graph."""
        return {
            "nodes": [
                {"id": node.id, "normal": {"fill": node.visual_class.value}}
                for node in self.nodes
            ],
            "edges": [
                {
                    "from": edge.from_address,
                    "to": edge.to_address,
                    "id": edge.tx_id,
                    "normal": {"stroke": {"color": edge.visual_class.value}},
                }
                for edge in self.edges
            ],
        }
