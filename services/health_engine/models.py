from pydantic import BaseModel, Field
from typing import List, Dict, Literal, Optional

QuestionType = Literal['multipleChoice', 'multipleSelect', 'text', 'other']
HealthBucket = Literal['healthy', 'needsTweaking', 'unhealthy']


class Option(BaseModel):
    label: str
    weight: float = 0  # Sign is never validated; negative weights are allowed


class Question(BaseModel):
    id: str
    text: str = ""
    type: QuestionType
    options: List[Option] = Field(default_factory=list)


class AssessmentSection(BaseModel):
    id: Optional[str] = None
    title: str
    order: int  # Section number used by the category mapping
    questions: List[Question] = Field(default_factory=list)


class AssessmentDefinition(BaseModel):
    sections: List[AssessmentSection]


class ReportResource(BaseModel):
    title: str
    description: str
    type: str


class ReportEntry(BaseModel):
    label: str
    message: str
    resources: List[ReportResource] = Field(default_factory=list)


class ReportContentConfig(BaseModel):
    # {category_key: {health_bucket: entry}}; partial tables are merged over the defaults
    categories: Dict[str, Dict[HealthBucket, ReportEntry]]
