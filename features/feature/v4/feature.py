from dataclasses import dataclass, field

STATUS_MESSAGE = "Processing v4 with optimization"


@dataclass(frozen=True)
class Feature:
    enabled: bool = field(default=True, init=False)
    optimized: bool = field(default=True, init=False)
    version: int = field(default=4, init=False)

    def process(self) -> None:
        print(STATUS_MESSAGE)


def register():
    return Feature()
