"""Schemas for documents, chat, templates and user administration."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.enums import UserRole


class DocumentUploadRequest(BaseModel):
    """Document metadata registered for a project."""

    model_config = ConfigDict(extra="forbid")

    filename: str = Field(..., min_length=1, max_length=255)
    content_type: str = Field("application/octet-stream", max_length=100)


class MessageRequest(BaseModel):
    """Post or edit a project chat or direct message."""

    model_config = ConfigDict(extra="forbid")

    content: str = Field(..., min_length=1, max_length=4000)


class TemplateCreateRequest(BaseModel):
    """Create a template from an existing project."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=3, max_length=150)
    category: str | None = Field(None, max_length=50)


class UserUpdateRequest(BaseModel):
    """Administrative user update."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=3, max_length=100)
    email: EmailStr | None = Field(None, max_length=150)
    role: UserRole | None = None


class DirectChatStartRequest(BaseModel):
    """Open (or reopen) a direct chat with another user."""

    model_config = ConfigDict(extra="forbid")

    receiver_id: int = Field(..., gt=0)
