"""Appointment store."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session, joinedload

from models import Appointment, User
from utils.datetime_utils import utc_now


class AppointmentRepository:
    """Persistence operations for appointments."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        return self.db.get(Appointment, appointment_id)

    def find_active_in_slot(self, provider_id: int, slot_start: datetime) -> Optional[Appointment]:
        """
        Find the non-canceled appointment holding a provider's hour slot.

        Args:
            provider_id: Provider user ID
            slot_start: Hour-normalized UTC datetime

        Returns:
            The active appointment, or None if the slot is free
        """
        return (
            self.db.query(Appointment)
            .filter(
                Appointment.provider_id == provider_id,
                Appointment.slot_start == slot_start,
                Appointment.canceled_at.is_(None),
            )
            .first()
        )

    def list_active_for_requester(self, requester_id: int, offset: int, limit: int) -> List[Appointment]:
        """
        List a requester's non-canceled appointments, earliest first.

        The provider and provider avatar are eager loaded for the list view.
        """
        return (
            self.db.query(Appointment)
            .options(joinedload(Appointment.provider).joinedload(User.avatar))
            .filter(
                Appointment.requester_id == requester_id,
                Appointment.canceled_at.is_(None),
            )
            .order_by(Appointment.date.asc(), Appointment.id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def add(self, appointment: Appointment) -> Appointment:
        """Stage a new appointment and flush so constraint violations surface here"""
        self.db.add(appointment)
        self.db.flush()
        return appointment

    def mark_canceled(self, appointment: Appointment, canceled_at: datetime) -> bool:
        """
        Set canceled_at only if the row is still uncanceled.

        The guard lives in the UPDATE itself, so a cancel committed by another
        session after `appointment` was loaded makes this a no-op.

        Returns:
            True if this call canceled the appointment, False if it was already canceled
        """
        result = self.db.execute(
            update(Appointment)
            .where(Appointment.id == appointment.id, Appointment.canceled_at.is_(None))
            .values(canceled_at=canceled_at, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            return False

        self.db.refresh(appointment)
        return True
