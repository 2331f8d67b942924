import argparse
import json
import logging
from typing import Optional

import jsonschema

from locations.builders.generate_location import build_mansion
from mysteries.case import Case
from mysteries.suspect_registry import SuspectRegistry
from service.config import Settings, get_settings
from service.logging_setup import setup_logging
from service.models import CaseTemplate

logger = logging.getLogger(__name__)


def load_template(name: Optional[str] = None, settings: Optional[Settings] = None) -> CaseTemplate:
    settings = settings or get_settings()
    name = name or settings.case_template
    template_path = settings.template_path(name)
    if not template_path.exists():
        raise SystemExit(f"Unknown case template: {name}")
    with template_path.open(encoding="utf-8") as handle:
        data = json.load(handle)
    with settings.case_schema_path.open(encoding="utf-8") as handle:
        schema = json.load(handle)
    jsonschema.validate(data, schema)
    return CaseTemplate.model_validate(data)


def build_registry(template: CaseTemplate, table_size: int = 10) -> SuspectRegistry:
    registry = SuspectRegistry(table_size)
    for suspect in template.suspects:
        for clue in suspect.clues:
            registry.associate(suspect.name, clue)
    return registry


def build_case(name: Optional[str] = None, settings: Optional[Settings] = None) -> Case:
    settings = settings or get_settings()
    template = load_template(name, settings)
    registry = build_registry(template, settings.table_size)
    logger.info(
        "Case %s ready: %d suspect(s) across %d bucket(s)",
        template.id, len(registry), registry.table_size,
    )
    return Case(
        case_id=template.id,
        title=template.title,
        mansion=build_mansion(template.mansion),
        registry=registry,
        accusation_threshold=settings.accusation_threshold,
    )


def main():
    parser = argparse.ArgumentParser(description="Load a case template and print the suspect analysis")
    parser.add_argument("--template", default=None, help="Case template name")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)
    case = build_case(args.template, settings)
    print(case.title)
    print(case.registry.report())


if __name__ == "__main__":
    main()
