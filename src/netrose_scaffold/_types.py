"""Domain enum naming the boilerplates the scaffolder can generate."""

from enum import Enum


class BoilerplateKind(str, Enum):
    """Available storage API client boilerplates."""

    SINGLE_ACCOUNT = "single-account"
    MULTI_ACCOUNT = "multi-account"

    @property
    def label(self) -> str:
        labels: dict[BoilerplateKind, str] = {
            BoilerplateKind.SINGLE_ACCOUNT: "Single-Account storage API client",
            BoilerplateKind.MULTI_ACCOUNT: "Multiple-Account storage API client",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[BoilerplateKind, str] = {
            BoilerplateKind.SINGLE_ACCOUNT: "One character per account. Client, account, scope, map and position models.",  # noqa: E501
            BoilerplateKind.MULTI_ACCOUNT: "Several characters per account. Adds a Character model to the single-account set.",  # noqa: E501
        }
        return descriptions[self]
