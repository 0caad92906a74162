"""Repository for Project database operations."""

import logging
import uuid
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from focusdeck.models.project import Project
from focusdeck.database.models import ProjectDB

logger = logging.getLogger(__name__)


class ProjectRepository:
    """Repository for Project database operations."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, project: Project) -> Project:
        """Create a new project."""
        try:
            project_db = ProjectDB.from_pydantic(project)
            self.db.add(project_db)
            self.db.commit()
            self.db.refresh(project_db)
            logger.debug(f"Created project {project.id}: {project.name[:50]}")
            return project_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create project {project.id}: {type(e).__name__}: {str(e)}")
            raise

    def get(self, project_id: str) -> Optional[Project]:
        """Get project by ID."""
        project_db = self.db.query(ProjectDB).filter(ProjectDB.id == project_id).first()
        return project_db.to_pydantic() if project_db else None

    def get_all(self) -> List[Project]:
        """Get all projects ordered by status, priority and name."""
        projects_db = self.db.query(ProjectDB).order_by(
            ProjectDB.status.asc(),
            ProjectDB.priority.asc(),
            ProjectDB.name.asc(),
        ).all()
        return [project_db.to_pydantic() for project_db in projects_db]

    def get_by_name(self, name: str) -> Optional[Project]:
        """Get the first project with an exact name match."""
        project_db = self.db.query(ProjectDB).filter(ProjectDB.name == name).first()
        return project_db.to_pydantic() if project_db else None

    def get_or_create_by_name(self, name: str) -> Project:
        """Resolve a quick-add project name, creating the project if needed."""
        existing = self.get_by_name(name)
        if existing:
            return existing
        logger.info(f"Creating project {name!r} from task capture")
        return self.create(Project(id=str(uuid.uuid4()), name=name, created_at=datetime.utcnow()))
