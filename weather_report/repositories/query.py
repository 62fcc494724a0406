from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from weather_report.models.weather import Observation, ObservationFields
from weather_report.repositories.base import RecordStore
from weather_report.repositories.sql import (
    COLUMNS,
    TABLE,
    InterpolationMode,
    coerce_float,
    coerce_int,
    parse_float,
    parse_int,
    sql_str,
)

logger = structlog.get_logger(__name__)

SELECT_MARKER = f"SELECT * FROM {TABLE}"
INSERT_MARKER = f"INSERT INTO {TABLE}"

# A string value ends at the quote that closes its clause, not at the first
# quote, so quotes inside a raw value survive extraction.
_CITY_CLAUSE = re.compile(
    r"city = '(.*?)'(?=\s+AND\s+date_recorded\s*>=|\s*$)", re.DOTALL
)
_DATE_CLAUSE = re.compile(r"date_recorded >= '(.*?)'\s*$", re.DOTALL)
_CITY_PARAM = re.compile(r"city = \?")
_DATE_PARAM = re.compile(r"date_recorded >= \?")

_INSERT_VALUES = re.compile(
    r"VALUES \('(.*?)', (.*?), '(.*?)', (.*?), (.*?), '(.*?)'\)", re.DOTALL
)
_INSERT_PLACEHOLDERS = re.compile(r"VALUES\s*\(\s*\?(?:\s*,\s*\?){5}\s*\)")


@dataclass(frozen=True)
class InsertInstruction:
    fields: ObservationFields


@dataclass(frozen=True)
class SelectInstruction:
    city_filter: str | None = None
    date_filter: str | None = None


Instruction = InsertInstruction | SelectInstruction


@dataclass(frozen=True)
class QueryResult:
    instruction: Instruction | None = None
    rows: list[Observation] = field(default_factory=list)
    last_id: int | None = None

    @property
    def recognized(self) -> bool:
        return self.instruction is not None


def parse_instruction(
    query: str, params: Sequence[object] | None = None
) -> Instruction | None:
    """Recover the intent of an instruction text.

    Returns ``None`` when the text matches neither the select nor the insert
    template. Values are taken verbatim from the text: nothing is unescaped.
    """
    if SELECT_MARKER in query:
        return _parse_select(query, list(params or []))
    if INSERT_MARKER in query:
        return _parse_insert(query, list(params or []))
    return None


def _parse_select(query: str, params: list[object]) -> SelectInstruction:
    city: str | None = None
    date: str | None = None

    if _CITY_PARAM.search(query) and params:
        city = str(params.pop(0))
    else:
        match = _CITY_CLAUSE.search(query)
        if match:
            city = match.group(1)

    if _DATE_PARAM.search(query) and params:
        date = str(params.pop(0))
    else:
        match = _DATE_CLAUSE.search(query)
        if match:
            date = match.group(1)

    return SelectInstruction(city_filter=city, date_filter=date)


def _parse_insert(query: str, params: list[object]) -> InsertInstruction | None:
    if _INSERT_PLACEHOLDERS.search(query):
        if len(params) != 6:
            logger.warning("query.insert_param_count", expected=6, got=len(params))
            return None
        city, temperature, conditions, humidity, wind_speed, date_recorded = params
        return InsertInstruction(
            ObservationFields(
                city=str(city),
                temperature=coerce_float(temperature),
                conditions=str(conditions),
                humidity=coerce_int(humidity),
                wind_speed=coerce_float(wind_speed),
                date_recorded=str(date_recorded),
            )
        )

    match = _INSERT_VALUES.search(query)
    if not match:
        return None
    city, temperature, conditions, humidity, wind_speed, date_recorded = match.groups()
    return InsertInstruction(
        ObservationFields(
            city=city,
            temperature=parse_float(temperature),
            conditions=conditions,
            humidity=parse_int(humidity),
            wind_speed=parse_float(wind_speed),
            date_recorded=date_recorded,
        )
    )


def build_insert(
    fields: ObservationFields, mode: InterpolationMode
) -> tuple[str, list[object] | None]:
    if mode is InterpolationMode.PARAMETERIZED:
        query = f"INSERT INTO {TABLE} ({COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)"
        return query, [
            fields.city,
            fields.temperature,
            fields.conditions,
            fields.humidity,
            fields.wind_speed,
            fields.date_recorded,
        ]
    values = ", ".join(
        [
            sql_str(fields.city, mode),
            str(fields.temperature),
            sql_str(fields.conditions, mode),
            str(fields.humidity),
            str(fields.wind_speed),
            sql_str(fields.date_recorded, mode),
        ]
    )
    return f"INSERT INTO {TABLE} ({COLUMNS}) VALUES ({values})", None


def build_select(
    city: str | None, from_date: str | None, mode: InterpolationMode
) -> tuple[str, list[object] | None]:
    query = SELECT_MARKER
    if mode is InterpolationMode.PARAMETERIZED:
        params: list[object] = []
        if city is not None:
            query += " WHERE city = ?"
            params.append(city)
        if from_date:
            query += " AND date_recorded >= ?" if city is not None else " WHERE date_recorded >= ?"
            params.append(from_date)
        return query, params

    if city is not None:
        query += f" WHERE city = {sql_str(city, mode)}"
    if from_date:
        joiner = " AND" if city is not None else " WHERE"
        query += f"{joiner} date_recorded >= {sql_str(from_date, mode)}"
    return query, None


class QueryEngine:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def execute(self, query: str, params: Sequence[object] | None = None) -> QueryResult:
        logger.debug("query.execute", query=query, params=len(params or []))
        instruction = parse_instruction(query, params)
        if instruction is None:
            logger.info("query.unrecognized")
            return QueryResult()
        return self.apply(instruction)

    def apply(self, instruction: Instruction) -> QueryResult:
        if isinstance(instruction, InsertInstruction):
            last_id = self._store.insert(instruction.fields)
            logger.info("query.inserted", id=last_id, city=instruction.fields.city)
            return QueryResult(instruction=instruction, last_id=last_id)

        if instruction.city_filter is not None:
            rows = self._store.select_by_city(instruction.city_filter)
        else:
            rows = self._store.select_all()
        if instruction.date_filter is not None:
            rows = [r for r in rows if r.date_recorded >= instruction.date_filter]
        logger.debug("query.selected", rows=len(rows))
        return QueryResult(instruction=instruction, rows=rows)

    def insert_observation(
        self,
        fields: ObservationFields,
        *,
        mode: InterpolationMode = InterpolationMode.PARAMETERIZED,
    ) -> QueryResult:
        query, params = build_insert(fields, mode)
        return self.execute(query, params)

    def select_observations(
        self,
        city: str | None,
        from_date: str | None = None,
        *,
        mode: InterpolationMode = InterpolationMode.RAW,
    ) -> QueryResult:
        query, params = build_select(city, from_date, mode)
        return self.execute(query, params)
