from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quini_scraper.types import MAX_NUMBER, MIN_NUMBER, DrawEntry, DrawSummary, ResultSet


class DrawEntryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    draw_id: str = Field(..., alias="sorteo")
    date: str = Field(..., alias="fecha")
    numbers: List[int] = Field(..., alias="numeros", description="Numbers as published, 0-45.")

    @field_validator("numbers")
    @classmethod
    def validate_numbers(cls, value: List[int]) -> List[int]:
        for n in value:
            if not MIN_NUMBER <= n <= MAX_NUMBER:
                raise ValueError(f"Numbers must be between {MIN_NUMBER} and {MAX_NUMBER}.")
        return value

    @classmethod
    def from_entry(cls, entry: DrawEntry) -> "DrawEntryResponse":
        return cls(draw_id=entry.draw_id, date=entry.date, numbers=list(entry.numbers))


class ResultSetResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    primary: List[DrawEntryResponse] = Field(default_factory=list, alias="tradicional")
    second: List[DrawEntryResponse] = Field(default_factory=list, alias="segunda")
    bonus: List[DrawEntryResponse] = Field(default_factory=list, alias="revancha")
    always_out: List[DrawEntryResponse] = Field(default_factory=list, alias="siempreSale")
    note: Optional[str] = Field(None, alias="nota")

    @classmethod
    def from_result(cls, result: ResultSet) -> "ResultSetResponse":
        def entries(values):
            return [DrawEntryResponse.from_entry(entry) for entry in values]

        return cls(
            primary=entries(result.primary),
            second=entries(result.second),
            bonus=entries(result.bonus),
            always_out=entries(result.always_out),
            note=result.note,
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class DrawSummaryResponse(BaseModel):
    numero: str
    fecha: str

    @classmethod
    def from_summary(cls, summary: DrawSummary) -> "DrawSummaryResponse":
        return cls(numero=summary.draw_id, fecha=summary.date)


class DrawListResponse(BaseModel):
    sorteos: List[DrawSummaryResponse]
