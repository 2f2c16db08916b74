"""Specification Schemas — already-parsed interface and flow records at the API boundary.

Invariants:
    - Accepts both parser camelCase keys and snake_case keys
    - Endpoints of flows may be empty or unknown: dropping them is the graph builder's job
    - to_core() hands plain core records to the functional core

Design Decisions:
    - AliasChoices over custom validators: Pydantic resolves the key aliases natively
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from trinity.core.spec_records import FlowRecord, InterfaceNode


class InterfaceIn(BaseModel):
    """One interface (screen) as produced by the specification parser."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("interfaceName", "interface_name", "name"),
    )
    available_actions: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("availableActions", "available_actions", "actions"),
    )
    id: str | None = None

    def to_core(self) -> InterfaceNode:
        return InterfaceNode(
            name=self.name, available_actions=tuple(self.available_actions), id=self.id,
        )


class FlowIn(BaseModel):
    """One flow (action-triggered transition) as produced by the specification parser."""
    model_config = ConfigDict(populate_by_name=True)

    from_interface: str = Field(
        "", validation_alias=AliasChoices("fromInterface", "from_interface", "from", "source"),
    )
    to_interface: str = Field(
        "", validation_alias=AliasChoices("redirectTo", "to_interface", "to", "target"),
    )
    trigger: str = Field("", validation_alias=AliasChoices("trigger", "action"))
    label: str | None = None
    name: str | None = Field(None, validation_alias=AliasChoices("name", "actionName"))

    def to_core(self) -> FlowRecord:
        return FlowRecord(
            from_interface=self.from_interface,
            to_interface=self.to_interface,
            trigger=self.trigger,
            label=self.label,
            name=self.name,
        )


class SpecificationIn(BaseModel):
    """Parsed specification: interfaces plus flows."""
    model_config = ConfigDict(populate_by_name=True)

    interfaces: list[InterfaceIn] = Field(
        validation_alias=AliasChoices("interfaces", "stateNodes"),
    )
    flows: list[FlowIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("flows", "parsedFlows"),
    )

    def interface_records(self) -> list[InterfaceNode]:
        return [i.to_core() for i in self.interfaces]

    def flow_records(self) -> list[FlowRecord]:
        return [f.to_core() for f in self.flows]

    def to_core(self) -> dict:
        """Shape accepted by NavigationController.initialize_screen_network."""
        return {"interfaces": self.interface_records(), "flows": self.flow_records()}
