from dataclasses import dataclass
from pathlib import Path

from .scheduler import validate_steps

DEFAULT_STEPS = 25
DEFAULT_DELAY = 1


@dataclass(frozen=True)
class RunConfig:
    input: Path
    output: Path
    steps: int = DEFAULT_STEPS
    delay: int = DEFAULT_DELAY

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        config = cls(
            input=Path(args.image),
            output=Path(args.out),
            steps=args.steps,
            delay=args.delay,
        )
        config.validate()
        return config

    def validate(self) -> None:
        validate_steps(self.steps, self.delay)
