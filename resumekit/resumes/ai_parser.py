"""
LLM-backed resume extraction with rule-based fallback

The remote model (OpenAI or a local Ollama server) returns the canonical record
as JSON. Any provider failure puts the provider on cooldown and the rule engine
answers instead, so extraction always produces a record.
"""
from typing import Any, Callable, Dict, List, Optional
import json
import re
import time
import openai
import requests
import structlog
from dateutil import parser as date_parser

from resumekit.core.config import settings
from resumekit.core.exceptions import AIEngineError
from resumekit.core.redis_client import get_cache, get_cache_key, set_cache, text_digest
from resumekit.resumes.extraction import Extractor, RuleBasedExtractor, rule_based_extractor, to_result
from resumekit.resumes.schemas import (
    PROFILE_MAX_CHARS,
    CanonicalResume,
    EducationEntry,
    ExperienceEntry,
    ExtractionResult,
    ProjectEntry,
    ResumeHeader,
    SkillGroup,
)
from resumekit.resumes.tenure import normalize_end_label

logger = structlog.get_logger()

PROMPT_MAX_CHARS = 8000
DEFAULT_SKILL_CATEGORY = "General"
ISO_MONTH = re.compile(r"^\d{4}-\d{2}(?:-\d{2})?$")


class ProviderState:
    """
    Availability of one remote provider.

    A failure marks the provider unavailable until ``cooldown_seconds`` have
    passed. The caller owns the instance; nothing here is global.
    """

    def __init__(self, cooldown_seconds: float = 60, clock: Callable[[], float] = time.monotonic):
        self.cooldown_seconds = cooldown_seconds
        self.clock = clock
        self.available = True
        self.last_error: Optional[float] = None

    def is_ready(self) -> bool:
        if not self.available and self.last_error is not None:
            if self.clock() - self.last_error >= self.cooldown_seconds:
                self.available = True
        return self.available

    def mark_failed(self):
        self.available = False
        self.last_error = self.clock()


def clean_text(text: str) -> str:
    """Collapse whitespace and split glued words and digits from PDF extraction"""
    text = re.sub(r"\s+", " ", text or "")
    text = re.sub(r"([a-z])([A-Z])", r"\1 \2", text)
    text = re.sub(r"(\d)([A-Za-z])", r"\1 \2", text)
    text = re.sub(r"([A-Za-z])(\d)", r"\1 \2", text)
    return re.sub(r" {2,}", " ", text).strip()


def build_prompt(text: str) -> str:
    return f"""Extract resume data as JSON. Only extract what exists in the text, never invent.

RESUME:
{text[:PROMPT_MAX_CHARS]}

Return JSON with exactly this shape, using empty strings or arrays when a field is absent:
{{"name":"","email":"","phone":"","linkedin":"","github":"","profile":"","skills":[{{"category":"","items":[]}}],"experience":[{{"role":"","company":"","startDate":"","endDate":"","bullets":[]}}],"education":[{{"degree":"","institution":"","year":""}}],"projects":[{{"name":"","description":"","tech":[]}}]}}

Rules:
1. Dates as written, e.g. "Jan 2020", "01/2020" or "2020"
2. Use "Present" for a current role ("Current", "Now", "Ongoing")
3. Keep each achievement as a separate bullet
4. Return ONLY valid JSON, no markdown, no explanation"""


def extract_json(response_text: str) -> Optional[Dict[str, Any]]:
    """Pull the JSON object out of a model response, ignoring markdown fences"""
    content = (response_text or "").replace("```json", "").replace("```", "").strip()
    start = content.find("{")
    end = content.rfind("}") + 1
    if start == -1 or end <= start:
        return None
    try:
        parsed = json.loads(content[start:end])
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def _text(value: Any) -> str:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value).strip()
    return ""


def _texts(values: Any) -> List[str]:
    if not isinstance(values, list):
        return []
    return [item for item in (_text(value) for value in values) if item]


def _pick(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _dicts(values: Any) -> List[Dict[str, Any]]:
    if not isinstance(values, list):
        return []
    return [value for value in values if isinstance(value, dict)]


def normalize_date_label(value: Any, is_end: bool = False) -> str:
    """
    Keep dates as written, except ISO ``YYYY-MM`` which becomes ``MM/YYYY``
    and present-synonyms on end dates, which become ``Present``.
    """
    label = _text(value)
    if is_end:
        label = normalize_end_label(label)
    if ISO_MONTH.match(label):
        try:
            return date_parser.isoparse(label).strftime("%m/%Y")
        except ValueError:
            return label
    return label


def normalize_payload(data: Dict[str, Any]) -> CanonicalResume:
    """Map a model's JSON onto the canonical record, dropping empty entries"""
    header = ResumeHeader(
        name=_text(data.get("name")),
        email=_text(data.get("email")).lower(),
        phone=_text(data.get("phone")),
        linkedin=_text(data.get("linkedin")),
        github=_text(data.get("github")),
    )

    skills = []
    raw_skills = data.get("skills")
    if isinstance(raw_skills, list) and raw_skills and all(isinstance(item, str) for item in raw_skills):
        raw_skills = [{"category": DEFAULT_SKILL_CATEGORY, "items": raw_skills}]
    for group in _dicts(raw_skills):
        items = _texts(group.get("items"))
        if items:
            skills.append(SkillGroup(category=_text(group.get("category")) or DEFAULT_SKILL_CATEGORY, items=items))

    experience = []
    for item in _dicts(data.get("experience")):
        role, company = _text(item.get("role")), _text(item.get("company"))
        if not role and not company:
            continue
        experience.append(ExperienceEntry(
            id=f"exp_{len(experience)}",
            role=role,
            company=company,
            start_date=normalize_date_label(_pick(item, "startDate", "start_date")),
            end_date=normalize_date_label(_pick(item, "endDate", "end_date"), is_end=True),
            bullets=_texts(item.get("bullets")),
        ))

    education = []
    for item in _dicts(data.get("education")):
        degree, institution = _text(item.get("degree")), _text(item.get("institution"))
        if not degree and not institution:
            continue
        education.append(EducationEntry(
            id=f"edu_{len(education)}", degree=degree, institution=institution, year=_text(item.get("year")),
        ))

    projects = []
    for item in _dicts(data.get("projects")):
        name = _text(item.get("name"))
        if not name:
            continue
        projects.append(ProjectEntry(
            id=f"proj_{len(projects)}",
            name=name,
            description=_text(item.get("description")),
            tech=_texts(item.get("tech")),
        ))

    return CanonicalResume(
        header=header,
        profile=_text(data.get("profile"))[:PROFILE_MAX_CHARS],
        experience=experience,
        education=education,
        skills=skills,
        projects=projects,
    )


class LLMExtractor(Extractor):
    """Remote model extraction, falling back to the rule engine on any failure"""

    def __init__(
        self,
        provider: Optional[str] = None,
        state: Optional[ProviderState] = None,
        fallback: RuleBasedExtractor = rule_based_extractor,
        openai_client: Any = None,
    ):
        self.provider = provider or settings.AI_PROVIDER
        self.state = state or ProviderState(cooldown_seconds=settings.PROVIDER_COOLDOWN_SECONDS)
        self.fallback = fallback
        self.openai_client = openai_client
        if self.provider == "openai" and self.openai_client is None and settings.OPENAI_API_KEY:
            self.openai_client = openai.OpenAI(api_key=settings.OPENAI_API_KEY, timeout=settings.LLM_TIMEOUT_SECONDS)
            logger.info("openai_client_initialized", model=settings.OPENAI_MODEL)

    @property
    def source(self) -> str:
        return self.provider

    def extract(self, text: str) -> ExtractionResult:
        cache_key = None
        if settings.EXTRACTION_CACHE_ENABLED:
            cache_key = get_cache_key("llm_extract", self.provider, text_digest(text))
            cached = get_cache(cache_key)
            if cached:
                logger.info("using_cached_llm_extraction", provider=self.provider)
                return ExtractionResult.model_validate(cached)

        if not self.state.is_ready():
            logger.info("llm_provider_cooling_down", provider=self.provider)
            return self.fallback.extract(text)

        try:
            response_text = self._complete(build_prompt(clean_text(text)))
        except AIEngineError as e:
            self.state.mark_failed()
            logger.warning("llm_extraction_failed", provider=self.provider, error=e.message)
            return self.fallback.extract(text)

        payload = extract_json(response_text)
        if payload is None:
            logger.error("llm_json_parse_error", provider=self.provider, response_preview=response_text[:200])
            return self.fallback.extract(text)

        result = to_result(normalize_payload(payload), self.source)
        logger.info(
            "llm_extraction_success",
            provider=self.provider,
            confidence=result.confidence,
            experience=len(result.resume.experience),
        )
        if cache_key:
            set_cache(cache_key, result.model_dump(mode="json"))
        return result

    def _complete(self, prompt: str) -> str:
        if self.provider == "openai":
            return self._complete_openai(prompt)
        if self.provider == "ollama":
            return self._complete_ollama(prompt)
        raise AIEngineError(f"Unknown AI provider: {self.provider}")

    def _complete_openai(self, prompt: str) -> str:
        if self.openai_client is None:
            raise AIEngineError("OpenAI API key is not configured")
        try:
            response = self.openai_client.chat.completions.create(
                model=settings.OPENAI_MODEL,
                messages=[
                    {
                        "role": "system",
                        "content": "You are a resume parser. Always return ONLY valid JSON, no markdown, no explanations.",
                    },
                    {"role": "user", "content": prompt},
                ],
                temperature=settings.AI_TEMPERATURE,
                max_tokens=settings.AI_MAX_TOKENS,
            )
            return response.choices[0].message.content or ""
        except Exception as e:
            raise AIEngineError("OpenAI request failed", details={"error": str(e)}) from e

    def _complete_ollama(self, prompt: str) -> str:
        try:
            response = requests.post(
                f"{settings.OLLAMA_ENDPOINT}/api/generate",
                json={
                    "model": settings.OLLAMA_MODEL,
                    "prompt": prompt,
                    "stream": False,
                    "options": {
                        "temperature": settings.AI_TEMPERATURE,
                        "num_predict": settings.AI_MAX_TOKENS,
                    },
                },
                timeout=settings.LLM_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            raise AIEngineError("Ollama request failed", details={"error": str(e)}) from e

        if response.status_code != 200:
            raise AIEngineError("Ollama returned an error", details={"status_code": response.status_code})
        try:
            return response.json().get("response", "")
        except ValueError as e:
            raise AIEngineError("Ollama returned a non-JSON body", details={"error": str(e)}) from e
