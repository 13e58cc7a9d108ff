"""
FastAPI application entry point.

Loads the threshold rule set once at startup and exposes the
``POST /classify`` and ``POST /annotate`` endpoints.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from riskmark.config import CONFIG_PATH
from riskmark.errors import RecordLoadError
from riskmark.models import Record
from riskmark.schemas import (
    AnnotateRequest,
    AnnotateResponse,
    ClassifyRequest,
    ClassifyResponse,
    EnvironmentSummary,
    RuleSet,
)
from riskmark.services import annotator, distribution_engine, record_loader, rule_loader
from riskmark.services.classifier import classify

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the rule set at startup; a bad configuration aborts the launch."""
    app.state.rule_set = rule_loader.load_rule_set(CONFIG_PATH)
    yield


app = FastAPI(
    title="riskmark threshold service",
    version="1.0.0",
    lifespan=lifespan,
)

# -- CORS (allow all origins for local / dev usage) -------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _rule_set(request: Request) -> RuleSet:
    return request.app.state.rule_set


# -- Routes ------------------------------------------------------------------

@app.get("/environments", response_model=list[EnvironmentSummary])
async def environments(request: Request):
    """List configured environments with their rule style and properties."""
    summaries = []
    for name, rules in _rule_set(request).environments.items():
        styles = {rule.style.value for rule in rules.values()}
        summaries.append(
            EnvironmentSummary(
                name=name,
                style=styles.pop() if len(styles) == 1 else "empty",
                properties=list(rules),
            )
        )
    return summaries


@app.post("/classify", response_model=ClassifyResponse)
async def classify_value(payload: ClassifyRequest, request: Request):
    """Classify a single value."""
    rule_set = _rule_set(request)
    level = classify(payload.environment, payload.property_name, payload.value, rule_set)
    rule = rule_set.lookup(payload.environment, payload.property_name)
    if rule is None:
        return ClassifyResponse(classification=level.name, label=level.label())
    return ClassifyResponse(
        classification=level.name,
        label=level.label(rule.style),
        style=rule.style.value,
    )


@app.post("/annotate", response_model=AnnotateResponse)
async def annotate(payload: AnnotateRequest, request: Request):
    """Annotate a batch of records and group the resulting labels."""
    records: list[Record] = []
    for index, item in enumerate(payload.records):
        try:
            if item.environment:
                records.append(Record.from_mapping(item.environment, item.fields))
            else:
                records.extend(
                    record_loader.build_records([item.fields], payload.default_environment)
                )
        except RecordLoadError as exc:
            raise HTTPException(status_code=400, detail=f"record {index}: {exc}")

    annotated = annotator.annotate_records(records, _rule_set(request))
    level_dist, property_dist = distribution_engine.compute_distributions(annotated)
    logger.info("Annotated %d record(s)", len(annotated))

    return AnnotateResponse(
        records=[{"environment": r.environment, "fields": r.to_dict()} for r in annotated],
        level_distribution=level_dist,
        property_distribution=property_dist,
    )
