# app/schemas/project_schema.py
from pydantic import Field
from typing import List, Optional
from datetime import datetime

from app.models.project import ProjectStatusEnum
from app.schemas.base_schema import CamelModel
from app.schemas.user_schema import UserOut
from app.schemas.application_schema import ApplicationOut

# 1. 基礎欄位 (對應 Model)
class ProjectBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    budget: str = Field(..., min_length=1, max_length=255) # 自由文字
    duration: str = Field(..., min_length=1, max_length=255) # 自由文字
    skills_required: List[str] = []
    category: str = Field(..., min_length=1, max_length=100)

# 2. 雇主刊登案件時的 Request Body (Input)
class ProjectCreate(ProjectBase):
    pass

# 3. 回傳給前端的案件資料 (Output)
class ProjectOut(ProjectBase):
    id: int
    client_id: int
    status: ProjectStatusEnum
    created_at: datetime
    assigned_freelancer_id: Optional[int] = None

# 4. 案件詳情：案件 + 雇主 + 所有申請
class ProjectDetailOut(ProjectOut):
    client: Optional[UserOut] = None
    applications: List[ApplicationOut] = []

# 5. 工作者檢視「我的申請」：申請 + 案件 + 雇主
# (放在這裡而不是 application_schema，避免循環匯入)
class ApplicationWithProjectOut(ApplicationOut):
    project: Optional[ProjectOut] = None
    client: Optional[UserOut] = None
