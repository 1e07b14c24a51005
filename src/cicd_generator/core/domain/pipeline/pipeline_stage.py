from dataclasses import dataclass
from enum import StrEnum


class StageKind(StrEnum):
    CHECKOUT = "checkout"
    INSTALL = "install"
    TEST = "test"
    BUILD = "build"
    CONTAINERIZE = "containerize"
    DEPLOY = "deploy"
    NOTIFY = "notify"

    @property
    def title(self) -> str:
        return STAGE_TITLES[self]


STAGE_TITLES: dict[StageKind, str] = {
    StageKind.CHECKOUT: "Checkout",
    StageKind.INSTALL: "Install Dependencies",
    StageKind.TEST: "Test",
    StageKind.BUILD: "Build",
    StageKind.CONTAINERIZE: "Docker Build",
    StageKind.DEPLOY: "Deploy",
    StageKind.NOTIFY: "Notify",
}


@dataclass(frozen=True)
class PipelineStage:
    """One stage of the pipeline.

    ``steps`` are Groovy step lines; ``environment`` is a rendered ``environment { }``
    block; ``script`` is a shell script run verbatim by a single ``sh`` step.
    """

    kind: StageKind
    steps: tuple[str, ...] = ()
    environment: str = ""
    script: str = ""

    @property
    def title(self) -> str:
        return self.kind.title
