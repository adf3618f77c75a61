from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	# Hugging Face Inference API; without a key the service answers from the keyword table only
	hf_api_key: str | None = Field(default=None, validation_alias="HF_API_KEY")
	hf_api_base: str = Field(default="https://api-inference.huggingface.co/models", validation_alias="HF_API_BASE")
	# Ordered, comma-separated model ids; rotation on 503/429 walks this list
	hf_models: str = Field(
		default="microsoft/DialoGPT-large,google/flan-t5-xl,gpt2",
		validation_alias="HF_MODELS",
	)
	# Generation parameters
	max_new_tokens: int = Field(default=150, validation_alias="HF_MAX_NEW_TOKENS")
	temperature: float = Field(default=0.7, validation_alias="HF_TEMPERATURE")
	request_timeout_seconds: float = Field(default=45.0, validation_alias="HF_TIMEOUT_SECONDS")

	# Answer cache
	cache_ttl_seconds: int = Field(default=3600, validation_alias="CACHE_TTL_SECONDS")
	cache_max_entries: int = Field(default=10000, validation_alias="CACHE_MAX_ENTRIES")

	# Acceptability of upstream answers
	min_answer_length: int = Field(default=10, validation_alias="MIN_ANSWER_LENGTH")
	failure_phrases: str = Field(
		default="trouble connecting,initializing,try again shortly",
		validation_alias="FAILURE_PHRASES",
	)

	# Server
	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=3000, validation_alias="PORT")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
	environment: str = Field(default="development", validation_alias="APP_ENV")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	@property
	def endpoint_models(self) -> List[str]:
		return [m.strip() for m in self.hf_models.split(",") if m.strip()]

	@property
	def failure_phrase_list(self) -> List[str]:
		return [p.strip() for p in self.failure_phrases.split(",") if p.strip()]

settings = Settings()
