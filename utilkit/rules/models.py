from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StringRules(BaseModel):
    truncate_length: int = Field(default=30, ge=0)
    truncate_suffix: str = "..."

class ArrayRules(BaseModel):
    chunk_size: int = Field(default=1, ge=1)
    flatten_depth: int = Field(default=1, ge=0)

class DateRules(BaseModel):
    default_pattern: str = "YYYY-MM-DD"

class FunctionRules(BaseModel):
    throttle_wait_ms: float = Field(default=100.0, ge=0)
    debounce_wait_ms: float = Field(default=100.0, ge=0)

class MemoizeRules(BaseModel):
    policy: Literal["unbounded", "lru", "ttl"] = "unbounded"
    max_size: int | None = Field(default=None, ge=1)
    ttl_seconds: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def check_policy_settings(self) -> "MemoizeRules":
        if self.policy == "lru" and self.max_size is None:
            raise ValueError("memoize.max_size is required for the lru policy")
        if self.policy == "ttl" and self.ttl_seconds is None:
            raise ValueError("memoize.ttl_seconds is required for the ttl policy")
        return self

class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

class UtilRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rules_version: str = "1"
    strings: StringRules = Field(default_factory=StringRules)
    arrays: ArrayRules = Field(default_factory=ArrayRules)
    dates: DateRules = Field(default_factory=DateRules)
    functions: FunctionRules = Field(default_factory=FunctionRules)
    memoize: MemoizeRules = Field(default_factory=MemoizeRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
