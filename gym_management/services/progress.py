"""Progress read model and the historical ``trainee_progress`` snapshots.

Live progress is computed from the workouts table on every call. Snapshots
are an optional history and never feed back into the live figures.
"""
import logging

from sqlalchemy import desc

from gym_management.errors import NotFound, ValidationError
from gym_management.extensions import db
from gym_management.models import ProgressSnapshot
from gym_management.services import commit
from gym_management.services import users as user_service
from gym_management.services import workouts as workout_service

logger = logging.getLogger(__name__)


def _project(member):
    stats = workout_service.workout_stats(member.id)
    return {
        "user_id": member.id,
        "name": member.name,
        "email": member.email,
        "total_workouts": stats["total_workouts"],
        "completed_workouts": stats["completed_workouts"],
        "progress_percentage": stats["completion_rate"],
    }


def all_members_progress():
    """One projection per member; admins are never included."""
    return [_project(member) for member in user_service.list_members()]


def single_member_progress(user_id):
    return _project(workout_service.require_member(user_id))


# ================================
# Snapshots
# ================================

def get_snapshot(snapshot_id) -> ProgressSnapshot:
    snapshot = db.session.get(ProgressSnapshot, snapshot_id)
    if not snapshot:
        raise NotFound("Progress record not found")
    return snapshot


def list_snapshots():
    return ProgressSnapshot.query.order_by(
        desc(ProgressSnapshot.last_updated), desc(ProgressSnapshot.id)
    ).all()


def latest_snapshots(trainee_id):
    """Most recent snapshot of a trainee as a list of at most one."""
    return (
        ProgressSnapshot.query.filter_by(trainee_id=trainee_id)
        .order_by(desc(ProgressSnapshot.last_updated), desc(ProgressSnapshot.id))
        .limit(1)
        .all()
    )


def create_snapshot(data):
    trainee = workout_service.require_member(data["trainee_id"])
    snapshot = ProgressSnapshot(
        trainee=trainee,
        completed_workouts=data["completed_workouts"],
        total_workouts=data["total_workouts"],
    )
    db.session.add(snapshot)
    commit()
    return snapshot


def update_snapshot(snapshot_id, changes):
    snapshot = get_snapshot(snapshot_id)
    if "trainee_id" in changes:
        snapshot.trainee = workout_service.require_member(changes.pop("trainee_id"))
    for field, value in changes.items():
        setattr(snapshot, field, value)

    if snapshot.completed_workouts > snapshot.total_workouts:
        db.session.rollback()
        raise ValidationError(
            errors={"completedWorkouts": ["completedWorkouts cannot exceed totalWorkouts"]}
        )

    snapshot.touch()
    commit()
    return snapshot


def delete_snapshot(snapshot_id):
    snapshot = get_snapshot(snapshot_id)
    db.session.delete(snapshot)
    commit()


def capture_snapshots():
    """Record the current live figures of every member."""
    snapshots = []
    for progress in all_members_progress():
        snapshot = ProgressSnapshot(
            trainee_id=progress["user_id"],
            completed_workouts=progress["completed_workouts"],
            total_workouts=progress["total_workouts"],
        )
        db.session.add(snapshot)
        snapshots.append(snapshot)
    commit()
    logger.info("Captured %d progress snapshots", len(snapshots))
    return snapshots
