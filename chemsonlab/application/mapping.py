"""Domain <-> DTO mapping.

Columns map by identity; the temporal fields a DTO class declares are
transcoded with chemsonlab.domain.temporal.  Related entities are mapped
recursively to their own read DTOs.

An absent (None) duration or timestamp on a request DTO is left unset on the
domain side, so a required field fails validation instead of silently
becoming zero.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from chemsonlab.domain import models
from chemsonlab.domain.temporal import format_date, format_duration, parse_date, parse_duration

from . import dto

# domain class -> (request DTO, read DTO)
DTOS: dict[type[BaseModel], tuple[type[dto.Dto], type[dto.Dto]]] = {
    models.Product: (dto.ProductRequest, dto.ProductDto),
    models.Machine: (dto.MachineRequest, dto.MachineDto),
    models.Customer: (dto.CustomerRequest, dto.CustomerDto),
    models.CustomerOrder: (dto.CustomerOrderRequest, dto.CustomerOrderDto),
    models.ProductSpecification: (
        dto.ProductSpecificationRequest,
        dto.ProductSpecificationDto,
    ),
    models.TestResult: (dto.TestResultRequest, dto.TestResultDto),
    models.Measurement: (dto.MeasurementRequest, dto.MeasurementDto),
    models.Evaluation: (dto.EvaluationRequest, dto.EvaluationDto),
    models.Batch: (dto.BatchRequest, dto.BatchDto),
    models.BatchTestResult: (dto.BatchTestResultRequest, dto.BatchTestResultDto),
    models.Coa: (dto.CoaRequest, dto.CoaDto),
    models.Report: (dto.ReportRequest, dto.ReportDto),
    models.TestResultReport: (dto.TestResultReportRequest, dto.TestResultReportDto),
    models.QcLabel: (dto.QcLabelRequest, dto.QcLabelDto),
    models.QcPerformanceKpi: (dto.QcPerformanceKpiRequest, dto.QcPerformanceKpiDto),
    models.QcAveTestTimeKpi: (dto.QcAveTestTimeKpiRequest, dto.QcAveTestTimeKpiDto),
    models.DailyQc: (dto.DailyQcRequest, dto.DailyQcDto),
}


def request_type(domain_cls: type[BaseModel]) -> type[dto.Dto]:
    return DTOS[domain_cls][0]


def to_dto(entity: BaseModel) -> dto.Dto:
    """Read DTO for a domain entity, related entities included."""
    dto_cls = DTOS[type(entity)][1]
    values: dict[str, Any] = {}
    for name in type(entity).model_fields:
        value = getattr(entity, name)
        if isinstance(value, BaseModel):
            value = to_dto(value)
        elif value is not None and name in dto_cls.durations:
            value = format_duration(value)
        elif value is not None and name in dto_cls.timestamps:
            value = format_date(value)
        values[name] = value
    return dto_cls.model_validate(values)


def from_dto(payload: dto.Dto, domain_cls: type[BaseModel]) -> BaseModel:
    """Domain entity from a request DTO (or a read DTO; extra fields are dropped).

    Raises FormatError for a malformed duration or timestamp and pydantic's
    ValidationError for anything else the domain model rejects.
    """
    request_cls = request_type(domain_cls)
    values = payload.model_dump(include=set(request_cls.model_fields))
    for name in request_cls.durations:
        raw = values.pop(name, None)
        if raw is not None:
            values[name] = parse_duration(raw)
    for name in request_cls.timestamps:
        raw = values.pop(name, None)
        if raw is not None:
            values[name] = parse_date(raw)
    return domain_cls.model_validate(values)
