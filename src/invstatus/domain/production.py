from __future__ import annotations

import math

from invstatus.domain.enums import ProductionStage, StageStatus
from invstatus.domain.errors import ValidationError
from invstatus.domain.models import Stage, StageProgress

STAGE_ORDER: tuple[ProductionStage, ...] = (
    ProductionStage.PLANNING,
    ProductionStage.MACHINE,
    ProductionStage.WASTAGE,
    ProductionStage.INDIVIDUAL,
)

STAGE_NAMES: dict[ProductionStage, str] = {
    ProductionStage.PLANNING: "Material Selection",
    ProductionStage.MACHINE: "Machine Operations",
    ProductionStage.WASTAGE: "Waste Generation",
    ProductionStage.INDIVIDUAL: "Individual Details",
}


def parse_stage(value: ProductionStage | str) -> ProductionStage:
    try:
        return ProductionStage(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in STAGE_ORDER)
        raise ValidationError(f"Unknown production stage '{value}'. Expected one of: {allowed}.") from None


def resolve_stage_progress(current_stage: ProductionStage | str) -> StageProgress:
    """Build the four-step progress model for a batch's current stage.

    Stages before ``current_stage`` are completed, the current one is active
    and later ones are pending. The overall percentage counts an active stage
    as half done. Transitions are not validated here; the caller decides
    which stage a batch is in.
    """
    current = parse_stage(current_stage)
    current_idx = STAGE_ORDER.index(current)

    stages = []
    for idx, stage_id in enumerate(STAGE_ORDER):
        if idx < current_idx:
            status = StageStatus.COMPLETED
        elif idx == current_idx:
            status = StageStatus.ACTIVE
        else:
            status = StageStatus.PENDING
        stages.append(Stage(id=stage_id, name=STAGE_NAMES[stage_id], status=status))

    completed = sum(1 for s in stages if s.status is StageStatus.COMPLETED)
    active = sum(1 for s in stages if s.status is StageStatus.ACTIVE)
    progress = ((completed + active * 0.5) / len(stages)) * 100

    return StageProgress(
        stages=tuple(stages),
        # halves round up: 12.5 -> 13
        overall_percent=int(math.floor(progress + 0.5)),
        current_name=STAGE_NAMES[current],
    )
