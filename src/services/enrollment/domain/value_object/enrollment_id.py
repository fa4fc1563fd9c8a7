from dataclasses import dataclass


@dataclass(frozen=True)
class EnrollmentId:
    """参加登録ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("EnrollmentId cannot be empty")

    def __str__(self) -> str:
        return self.value
