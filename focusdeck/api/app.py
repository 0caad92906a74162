"""FastAPI web application for focusdeck."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import List, Optional
import uuid

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from focusdeck.database.database import get_db, init_db
from focusdeck.database.repository import TaskRepository
from focusdeck.database.project_repository import ProjectRepository
from focusdeck.engine.quick_add import parse_quick_add, format_parsed_task
from focusdeck.engine.ranking import get_next_best_actions
from focusdeck.engine.insights import get_rice_insights
from focusdeck.engine.today import build_today_view
from focusdeck.engine.rice import format_rice_score, get_rice_advice
from focusdeck.models.parsed_task import ParsedTask
from focusdeck.models.project import Project, ProjectStatus
from focusdeck.models.rice import RICEInsights, TodayView
from focusdeck.models.task import Task, TaskStatus, Priority, Effort
from focusdeck.models.task_factory import create_task_base, create_task_from_parsed

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


# Initialize FastAPI app
app = FastAPI(
    title="focusdeck API",
    description="Task tracker that tells you the next best thing to work on",
    version=API_VERSION,
    lifespan=lifespan,
)


# Request models
class TaskCreateRequest(BaseModel):
    """Explicit task creation."""
    title: str = Field(..., min_length=1)
    project_id: Optional[str] = None
    project_name: Optional[str] = Field(None, description="Resolved to a project, created if missing")
    priority: Optional[Priority] = None
    effort: Optional[Effort] = None
    due_date: Optional[datetime] = None
    labels: List[str] = Field(default_factory=list)
    impact: Optional[float] = None
    is_must_do: bool = False


class TaskUpdateRequest(BaseModel):
    """Partial task update (must-do toggle, status change)."""
    is_must_do: Optional[bool] = None
    status: Optional[TaskStatus] = None


class QuickAddRequest(BaseModel):
    """One line of quick-add text."""
    text: str


class ProjectCreateRequest(BaseModel):
    """Project creation."""
    name: str = Field(..., min_length=1)
    goal: Optional[str] = None
    notes: Optional[str] = None
    priority: Priority = Priority.P2
    status: ProjectStatus = ProjectStatus.ACTIVE


# Response models
class TaskResponse(BaseModel):
    task: Task


class TaskListResponse(BaseModel):
    tasks: List[Task]
    count: int


class ProjectResponse(BaseModel):
    project: Project


class ProjectListResponse(BaseModel):
    projects: List[Project]
    count: int


class QuickAddPreviewResponse(BaseModel):
    """Parsed quick-add fields plus their canonical text form."""
    title: str
    project_name: Optional[str] = None
    priority: Optional[str] = None
    effort: Optional[str] = None
    due_date: Optional[datetime] = None
    labels: Optional[List[str]] = None
    formatted: str


class RankedTask(BaseModel):
    task: Task
    rice_label: str
    advice: str


class NextActionsResponse(BaseModel):
    actions: List[RankedTask]
    count: int


def _resolve_project_id(db: Session, project_id: Optional[str], project_name: Optional[str]) -> Optional[str]:
    """Return an existing project id, or resolve/create one by name."""
    projects = ProjectRepository(db)
    if project_id:
        if projects.get(project_id) is None:
            raise HTTPException(status_code=404, detail=f"Project {project_id} not found")
        return project_id
    if project_name:
        return projects.get_or_create_by_name(project_name).id
    return None


def _persist_parsed(db: Session, parsed: ParsedTask) -> Task:
    if not parsed.title:
        raise HTTPException(status_code=400, detail="Quick-add text has no title")
    project_id = _resolve_project_id(db, None, parsed.project_name)
    return TaskRepository(db).create(create_task_from_parsed(parsed, project_id=project_id))


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": API_VERSION}


@app.get("/tasks", response_model=TaskListResponse)
def list_tasks(db: Session = Depends(get_db)):
    """List all tasks."""
    tasks = TaskRepository(db).get_all()
    return TaskListResponse(tasks=tasks, count=len(tasks))


@app.post("/tasks", response_model=TaskResponse, status_code=201)
def create_task(request: TaskCreateRequest, db: Session = Depends(get_db)):
    """Create a task from explicit fields."""
    try:
        project_id = _resolve_project_id(db, request.project_id, request.project_name)
        task = create_task_base(
            title=request.title,
            project_id=project_id,
            priority=request.priority,
            effort=request.effort,
            due_date=request.due_date,
            labels=request.labels,
            impact=request.impact,
            is_must_do=request.is_must_do,
        )
        return TaskResponse(task=TaskRepository(db).create(task))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create task: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to create task: {str(e)}")


@app.post("/tasks/quick-add", response_model=TaskResponse, status_code=201)
def quick_add_task(request: QuickAddRequest, db: Session = Depends(get_db)):
    """Parse quick-add text and persist the resulting task."""
    try:
        parsed = parse_quick_add(request.text)
        return TaskResponse(task=_persist_parsed(db, parsed))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to quick-add task: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to create task: {str(e)}")


@app.post("/quick-add/preview", response_model=QuickAddPreviewResponse)
def preview_quick_add(request: QuickAddRequest):
    """Parse quick-add text without saving anything."""
    parsed = parse_quick_add(request.text)
    return QuickAddPreviewResponse(
        title=parsed.title,
        project_name=parsed.project_name,
        priority=parsed.priority,
        effort=parsed.effort,
        due_date=parsed.due_date,
        labels=parsed.labels,
        formatted=format_parsed_task(parsed),
    )


@app.get("/tasks/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, db: Session = Depends(get_db)):
    """Get a single task."""
    task = TaskRepository(db).get(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")
    return TaskResponse(task=task)


@app.patch("/tasks/{task_id}", response_model=TaskResponse)
def update_task(task_id: str, request: TaskUpdateRequest, db: Session = Depends(get_db)):
    """Toggle must-do or change status. Clears the cached RICE score."""
    changes = request.model_dump(exclude_none=True)
    try:
        task = TaskRepository(db).touch(task_id, **changes)
    except Exception as e:
        logger.error(f"Failed to update task {task_id}: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to update task: {str(e)}")
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")
    return TaskResponse(task=task)


@app.delete("/tasks/{task_id}", status_code=204)
def delete_task(task_id: str, db: Session = Depends(get_db)):
    """Delete a task."""
    if not TaskRepository(db).delete(task_id):
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")


@app.get("/projects", response_model=ProjectListResponse)
def list_projects(db: Session = Depends(get_db)):
    """List all projects."""
    projects = ProjectRepository(db).get_all()
    return ProjectListResponse(projects=projects, count=len(projects))


@app.post("/projects", response_model=ProjectResponse, status_code=201)
def create_project(request: ProjectCreateRequest, db: Session = Depends(get_db)):
    """Create a project."""
    try:
        project = Project(
            id=str(uuid.uuid4()),
            name=request.name,
            goal=request.goal,
            notes=request.notes,
            priority=request.priority,
            status=request.status,
            created_at=datetime.utcnow(),
        )
        return ProjectResponse(project=ProjectRepository(db).create(project))
    except Exception as e:
        logger.error(f"Failed to create project: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to create project: {str(e)}")


@app.get("/next-actions", response_model=NextActionsResponse)
def next_actions(db: Session = Depends(get_db)):
    """Rank open tasks, excluding must-dos."""
    candidates = [task for task in TaskRepository(db).get_active() if not task.is_must_do]
    ranked = get_next_best_actions(candidates)
    actions = [
        RankedTask(task=task, rice_label=format_rice_score(task.rice_score), advice=get_rice_advice(task))
        for task in ranked
    ]
    return NextActionsResponse(actions=actions, count=len(actions))


@app.get("/insights", response_model=RICEInsights)
def insights(db: Session = Depends(get_db)):
    """RICE insight buckets over open tasks."""
    return get_rice_insights(TaskRepository(db).get_active())


@app.get("/today", response_model=TodayView)
def today(db: Session = Depends(get_db)):
    """Must-dos plus ranked next best actions."""
    return build_today_view(TaskRepository(db).get_all())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
