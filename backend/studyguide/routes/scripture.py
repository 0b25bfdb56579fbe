from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from studyguide.scripture import default_registry, display_name, normalizer_for
from studyguide.services.security_validator import security_validator

router = APIRouter(prefix="/scripture", tags=["scripture"])


class ReferencePayload(BaseModel):
    reference: str = Field(..., description="Scripture reference typed by the user, e.g. 'John 3:16'")


class NormalizePayload(BaseModel):
    text: str = Field("", description="Generated study-guide text")
    locale: str | None = Field(default=None, description="Locale code, e.g. en-US, hi-IN, ml-IN")
    conversation_id: str | None = None


@router.post("/validate")
def validate_reference(body: ReferencePayload):
    result = security_validator.validate_input(body.reference, "scripture")
    if not result.is_valid:
        raise HTTPException(
            status_code=400,
            detail={
                "code": result.event_type,
                "message": result.message,
                "risk_score": result.risk_score,
                "details": result.details,
            },
        )
    return {
        "valid": True,
        "reference": security_validator.sanitize_input(body.reference),
        "risk_score": result.risk_score,
        "details": result.details,
    }


@router.post("/normalize")
def normalize_text(body: NormalizePayload):
    normalizer = normalizer_for(body.locale)
    report = normalizer.validate(body.text)
    if body.conversation_id:
        normalizer.log_validation_warnings(report, body.conversation_id)
    normalized = normalizer.normalize(body.text)
    return {
        "locale": normalizer.locale,
        "text": normalized,
        "report": report.to_dict(),
        "references": normalizer.extract_references(normalized),
    }


@router.get("/books/{locale}")
def list_books(locale: str):
    registry = default_registry()
    resolved = registry.resolve_locale(locale)
    if resolved != locale and resolved.split("-")[0] != locale.lower().split("-")[0]:
        raise HTTPException(status_code=404, detail=f"Unsupported locale: {locale}")
    english = registry.lookup_canonical("en-US")
    books = [
        {"name": name, "english": english[idx], "display_name": display_name(english[idx], resolved)}
        for idx, name in enumerate(registry.lookup_canonical(resolved))
    ]
    return {"locale": resolved, "count": len(books), "books": books}
