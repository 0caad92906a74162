"""Tests for TaskRepository and ProjectRepository CRUD operations."""

import pytest
from datetime import datetime, timedelta
import uuid

from focusdeck.models.task import Task, TaskStatus
from focusdeck.models.project import Project


class TestTaskRepository:
    """Test TaskRepository CRUD operations."""

    def test_create_task(self, task_repository, sample_task):
        """Test creating a task."""
        created = task_repository.create(sample_task)

        assert created.id == sample_task.id
        assert created.title == sample_task.title
        assert created.priority == "P2"
        assert created.effort == "M"
        assert created.status == TaskStatus.INBOX

    def test_labels_round_trip(self, task_repository, make_task):
        created = task_repository.create(make_task(labels=["sales", "ops"]))
        assert task_repository.get(created.id).labels == ["sales", "ops"]

    def test_get_nonexistent_task(self, task_repository):
        """Test retrieving a nonexistent task returns None."""
        assert task_repository.get("nonexistent-id") is None

    def test_get_all_ordering(self, task_repository, make_task, now):
        """Priority first, then dated before undated (earliest first), then creation date."""
        task_repository.create(make_task(title="p2-undated", created_at=now - timedelta(days=9)))
        task_repository.create(make_task(title="p2-late", due_date=now + timedelta(days=5)))
        task_repository.create(make_task(title="p2-soon", due_date=now + timedelta(days=1)))
        task_repository.create(make_task(title="p0", priority="P0"))

        titles = [task.title for task in task_repository.get_all()]
        assert titles == ["p0", "p2-soon", "p2-late", "p2-undated"]

    def test_get_active_excludes_done(self, task_repository, make_task):
        task_repository.create(make_task(title="open"))
        task_repository.create(make_task(title="done", status=TaskStatus.DONE))

        active = task_repository.get_active()
        assert [task.title for task in active] == ["open"]

    def test_update_task(self, task_repository, sample_task):
        created = task_repository.create(sample_task)
        updated = task_repository.update(created.model_copy(update={"title": "Renamed", "is_must_do": True}))

        assert updated.title == "Renamed"
        assert updated.is_must_do is True

    def test_update_nonexistent_task_raises(self, task_repository, sample_task):
        with pytest.raises(ValueError):
            task_repository.update(sample_task)

    def test_touch_bumps_timestamp_and_clears_cache(self, task_repository, make_task):
        created = task_repository.create(make_task(rice_score=12.0))
        touched = task_repository.touch(created.id, status=TaskStatus.DONE)

        assert touched.status == TaskStatus.DONE
        assert touched.rice_score is None
        assert touched.last_touched_at > created.last_touched_at

    def test_touch_nonexistent_task(self, task_repository):
        assert task_repository.touch("missing", is_must_do=True) is None

    def test_delete_task(self, task_repository, sample_task):
        created = task_repository.create(sample_task)

        assert task_repository.delete(created.id) is True
        assert task_repository.get(created.id) is None
        assert task_repository.delete(created.id) is False


class TestProjectRepository:
    """Test ProjectRepository operations."""

    def test_get_or_create_creates_once(self, project_repository):
        first = project_repository.get_or_create_by_name("launch")
        second = project_repository.get_or_create_by_name("launch")

        assert first.id == second.id
        assert len(project_repository.get_all()) == 1

    def test_get_by_name_is_exact(self, project_repository):
        project_repository.get_or_create_by_name("Launch")
        assert project_repository.get_by_name("launch") is None

    def test_get_all_ordering(self, project_repository):
        now = datetime.utcnow()
        for name, priority, status in [("b", "P1", "active"), ("a", "P1", "active"), ("z", "P0", "paused"), ("c", "P0", "active")]:
            project_repository.create(
                Project(id=str(uuid.uuid4()), name=name, priority=priority, status=status, created_at=now)
            )
        assert [p.name for p in project_repository.get_all()] == ["c", "a", "b", "z"]

    def test_task_carries_project_name(self, project_repository, task_repository, make_task):
        project = project_repository.get_or_create_by_name("launch")
        created = task_repository.create(make_task(project_id=project.id))

        assert created.project_name == "launch"
