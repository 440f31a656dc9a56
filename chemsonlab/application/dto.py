"""Wire-facing data transfer objects.

Field names are camelCase on the wire (``batchName``) and snake_case in
Python; either is accepted on input.  Each entity has a request DTO (the
writable columns, used for create/update) and a read DTO that adds the id
and the related entities.

Durations travel as ``HH:MM:SS`` strings and test timestamps as
``dd/mm/YYYY HH:MM``; the fields carrying them are listed in the
``durations`` / ``timestamps`` class attributes and transcoded in
mapping.py.  Other datetimes travel as ISO 8601.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Dto(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    durations: ClassVar[tuple[str, ...]] = ()
    timestamps: ClassVar[tuple[str, ...]] = ()


# --- Reference ---


class ProductRequest(Dto):
    name: str
    status: bool = True
    sample_amount: float | None = None
    db_date: datetime | None = None
    comment: str | None = None
    coa: bool | None = None
    colour: str | None = None
    torque_warning: float | None = None
    torque_fail: float | None = None
    fusion_warning: float | None = None
    fusion_fail: float | None = None
    update_date: datetime | None = None
    bulk_weight: float | None = None
    paper_bag_weight: float | None = None
    paper_bag_no: int | None = None
    batch_weight: float | None = None


class ProductDto(ProductRequest):
    id: int


class MachineRequest(Dto):
    name: str
    status: bool = True


class MachineDto(MachineRequest):
    id: int


class CustomerRequest(Dto):
    name: str
    email: str
    status: bool = True


class CustomerDto(CustomerRequest):
    id: int


# --- Orders ---


class CustomerOrderRequest(Dto):
    customer_id: int
    product_id: int
    status: bool = True


class CustomerOrderDto(CustomerOrderRequest):
    id: int
    customer: CustomerDto | None = None
    product: ProductDto | None = None


class ProductSpecificationRequest(Dto):
    product_id: int
    machine_id: int
    in_use: bool | None = None
    temp: int | None = None
    load: int | None = None
    rpm: int | None = None


class ProductSpecificationDto(ProductSpecificationRequest):
    id: int
    product: ProductDto | None = None
    machine: MachineDto | None = None


# --- Testing ---


class TestResultRequest(Dto):
    __test__ = False

    timestamps: ClassVar[tuple[str, ...]] = ("test_date",)

    product_id: int
    machine_id: int
    test_date: str | None = None
    operator_name: str | None = None
    drive_unit: str | None = None
    mixer: str | None = None
    loading_chute: str | None = None
    additive: str | None = None
    speed: float | None = None
    mixer_temp: float | None = None
    start_temp: float | None = None
    meas_range: int | None = None
    damping: int | None = None
    test_time: float | None = None
    sample_weight: float | None = None
    code_number: str | None = None
    plasticizer: str | None = None
    plast_weight: float | None = None
    load_time: float | None = None
    load_speed: float | None = None
    liquid: str | None = None
    titrate: float | None = None
    test_number: int | None = None
    test_type: str | None = None
    batch_group: str | None = None
    test_method: str | None = None
    colour: str | None = None
    status: bool | None = None
    file_name: str | None = None


class TestResultDto(TestResultRequest):
    __test__ = False

    id: int
    product: ProductDto | None = None
    machine: MachineDto | None = None


class MeasurementRequest(Dto):
    durations: ClassVar[tuple[str, ...]] = ("time_act",)

    test_result_id: int
    time_act: str | None = None
    torque: float | None = None
    bandwidth: float | None = None
    stock_temp: float | None = None
    speed: float | None = None
    file_name: str | None = None


class MeasurementDto(MeasurementRequest):
    id: int
    test_result: TestResultDto | None = None


class EvaluationRequest(Dto):
    durations: ClassVar[tuple[str, ...]] = ("time_eval", "time_range")

    test_result_id: int
    point: int | None = None
    point_name: str | None = None
    time_eval: str | None = None
    torque: float | None = None
    bandwidth: float | None = None
    stock_temp: float | None = None
    speed: float | None = None
    energy: float | None = None
    time_range: str | None = None
    torque_range: float | None = None
    time_eval_int: int | None = None
    time_range_int: int | None = None
    file_name: str | None = None


class EvaluationDto(EvaluationRequest):
    id: int
    test_result: TestResultDto | None = None


# --- Batches ---


class BatchRequest(Dto):
    product_id: int
    batch_name: str
    sample_by: str | None = None
    suffix: str | None = None


class BatchDto(BatchRequest):
    id: int
    product: ProductDto | None = None


class BatchTestResultRequest(Dto):
    batch_id: int
    test_result_id: int


class BatchTestResultDto(BatchTestResultRequest):
    id: int
    batch: BatchDto | None = None
    test_result: TestResultDto | None = None


class CoaRequest(Dto):
    product_id: int
    batch_name: str


class CoaDto(CoaRequest):
    id: int
    product: ProductDto | None = None


# --- Reports ---


class ReportRequest(Dto):
    create_by: str | None = None
    create_date: datetime
    status: bool = True


class ReportDto(ReportRequest):
    id: int


class TestResultReportRequest(Dto):
    __test__ = False

    report_id: int | None = None
    batch_test_result_id: int | None = None
    standard_reference: str | None = None
    torque_diff: float | None = None
    fusion_diff: float | None = None
    result: bool | None = None
    comment: str | None = None
    ave_test_time: int | None = None
    file_location: str | None = None


class TestResultReportDto(TestResultReportRequest):
    __test__ = False

    id: int
    report: ReportDto | None = None
    batch_test_result: BatchTestResultDto | None = None


# --- QC ---


class QcLabelRequest(Dto):
    batch_name: str | None = None
    printed: bool | None = None
    product_id: int | None = None
    year: str | None = None
    month: str | None = None


class QcLabelDto(QcLabelRequest):
    id: int
    product: ProductDto | None = None


class QcPerformanceKpiRequest(Dto):
    product_id: int | None = None
    machine_id: int | None = None
    year: str | None = None
    month: str | None = None
    total_test: int | None = None
    first_pass: int | None = None
    second_pass: int | None = None
    third_pass: int | None = None


class QcPerformanceKpiDto(QcPerformanceKpiRequest):
    id: int
    product: ProductDto | None = None
    machine: MachineDto | None = None


class QcAveTestTimeKpiRequest(Dto):
    product_id: int | None = None
    machine_id: int | None = None
    year: str | None = None
    month: str | None = None
    total_test: int | None = None
    ave_test_time: int | None = None


class QcAveTestTimeKpiDto(QcAveTestTimeKpiRequest):
    id: int
    product: ProductDto | None = None
    machine: MachineDto | None = None


class DailyQcRequest(Dto):
    incoming_date: datetime
    product_id: int
    priority: int | None = None
    comment: str | None = None
    batches: str | None = None
    std_reqd: str | None = None
    extras: str | None = None
    mixes_reqd: int | None = None
    mixed: int | None = None
    test_status: str | None = None
    last_label: str | None = None
    last_batch: str | None = None
    tested_date: datetime | None = None
    year: str | None = None
    month: str | None = None


class DailyQcDto(DailyQcRequest):
    id: int
    product: ProductDto | None = None
