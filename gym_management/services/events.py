import logging

from gym_management.errors import Conflict, InvalidRole, NotFound
from gym_management.extensions import db
from gym_management.models import Event, EventRegistration
from gym_management.services import commit

logger = logging.getLogger(__name__)


def get_event(event_id) -> Event:
    event = db.session.get(Event, event_id)
    if not event:
        raise NotFound(f"Event with ID {event_id} not found")
    return event


def list_events():
    return Event.query.order_by(Event.date, Event.time, Event.id).all()


def create_event(data, creator):
    """Creator must be an admin; routes check that before calling."""
    event = Event(
        title=data["title"],
        date=data["date"],
        time=data["time"],
        location=data["location"],
        image_uri=data.get("image_uri"),
        created_by=creator,
    )
    db.session.add(event)
    commit()
    logger.info("Created event %s by user %s", event.id, creator.id)
    return event


def update_event(event_id, changes):
    event = get_event(event_id)
    for field, value in changes.items():
        setattr(event, field, value)
    commit()
    logger.info("Updated event %s", event.id)
    return event


def delete_event(event_id):
    event = get_event(event_id)
    db.session.delete(event)
    commit()
    logger.info("Deleted event %s", event_id)


# ================================
# Registrations
# ================================

def register_member(event_id, user):
    event = get_event(event_id)
    if not user.is_member:
        raise InvalidRole("Only members can register for events")
    if EventRegistration.query.filter_by(event_id=event.id, user_id=user.id).first():
        raise Conflict("Already registered for this event")

    registration = EventRegistration(event=event, user=user)
    db.session.add(registration)
    commit()
    logger.info("User %s registered for event %s", user.id, event.id)
    return registration


def unregister_member(event_id, user):
    event = get_event(event_id)
    registration = EventRegistration.query.filter_by(event_id=event.id, user_id=user.id).first()
    if not registration:
        raise NotFound("Not registered for this event")
    db.session.delete(registration)
    commit()
    logger.info("User %s unregistered from event %s", user.id, event.id)


def list_user_events(user_id):
    return (
        Event.query.join(EventRegistration, EventRegistration.event_id == Event.id)
        .filter(EventRegistration.user_id == user_id)
        .order_by(Event.date, Event.time, Event.id)
        .all()
    )
