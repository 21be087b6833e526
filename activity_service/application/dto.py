from dataclasses import dataclass


@dataclass
class ActivityInput:
    title: str | None = None
    description: str | None = None
    date: str | None = None


@dataclass
class ActivityPatch:
    title: str | None = None
    description: str | None = None
    date: str | None = None

    def changes(self) -> dict[str, str]:
        # empty strings are treated like absent fields, never as a clear
        return {k: v for k, v in vars(self).items() if v}
