"""Populate an empty database with the starter FAQ entries and sample events.

Run with ``python -m ecoevents.seed``. Tables that already hold rows are left
alone, so running it twice does not duplicate anything.
"""
from datetime import date, timedelta
import asyncio
import logging
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from ecoevents.database import AsyncSessionLocal, init_models
from ecoevents.models.event import Event, EventStatus
from ecoevents.models.faq import Faq

logger = logging.getLogger(__name__)

FAQ_SEED = [
    {
        "question": "¿Qué son los eventos sostenibles?",
        "answer": "Los eventos sostenibles son actividades que se organizan considerando el impacto ambiental, social y económico. Minimizan el uso de recursos naturales, promueven la participación comunitaria y generan beneficios duraderos para la sociedad.",
        "category": "Sostenibilidad",
    },
    {
        "question": "¿Cómo puedo participar en un evento?",
        "answer": "Regístrate en la plataforma, busca eventos en tu área de interés y haz clic en \"Participar\". Recibirás una confirmación por email con toda la información del evento.",
        "category": "Participación",
    },
    {
        "question": "¿Los eventos son gratuitos?",
        "answer": "La mayoría de los eventos son gratuitos. Algunos tienen un costo mínimo para cubrir materiales u organización, y el precio siempre se indica en la descripción del evento.",
        "category": "General",
    },
    {
        "question": "¿Qué debo llevar a un evento?",
        "answer": "Depende del tipo de evento. Para actividades al aire libre recomendamos ropa cómoda, calzado adecuado, agua y protección solar. Para talleres basta con ganas de aprender.",
        "category": "Eventos",
    },
    {
        "question": "¿Puedo cancelar mi participación?",
        "answer": "Sí, puedes cancelar hasta 24 horas antes del evento. Así otras personas de la lista de espera pueden ocupar tu plaza.",
        "category": "Participación",
    },
    {
        "question": "¿Cómo se organizan los eventos?",
        "answer": "Los organizan miembros de la comunidad, organizaciones locales y voluntarios. Cada evento tiene un coordinador responsable de la logística.",
        "category": "Eventos",
    },
    {
        "question": "¿Qué pasa si llueve el día del evento?",
        "answer": "Los eventos al aire libre pueden reprogramarse o trasladarse a un lugar cubierto. Siempre avisamos con antelación de cualquier cambio.",
        "category": "Eventos",
    },
    {
        "question": "¿Puedo sugerir ideas para nuevos eventos?",
        "answer": "¡Por supuesto! Envía tus ideas a través del formulario de contacto o habla directamente con los organizadores en cualquier evento.",
        "category": "Participación",
    },
    {
        "question": "¿Los eventos son accesibles para personas con discapacidad?",
        "answer": "Nos esforzamos para que todos los eventos sean accesibles. Si tienes necesidades específicas, contáctanos con antelación para hacer los ajustes necesarios.",
        "category": "Participación",
    },
]

EVENT_SEED = [
    {
        "name": "Taller de Compostaje Urbano",
        "days_ahead": 7,
        "venue": "Parque Central, Madrid",
        "description": "Aprende a crear tu propio compost en casa. Ideal para reducir residuos y crear abono natural para tus plantas.",
        "activity_type": "Taller",
        "organizer": "EcoMadrid",
        "max_capacity": 25,
    },
    {
        "name": "Conferencia: Sostenibilidad en la Ciudad",
        "days_ahead": 14,
        "venue": "Centro Cultural, Barcelona",
        "description": "Charlas sobre iniciativas sostenibles en entornos urbanos con expertos que comparten experiencias y buenas prácticas.",
        "activity_type": "Conferencia",
        "organizer": "Green Barcelona",
        "max_capacity": 100,
    },
    {
        "name": "Limpieza de Playa",
        "days_ahead": 3,
        "venue": "Playa de la Barceloneta, Barcelona",
        "description": "Únete a la limpieza de playas para mantener las costas limpias y proteger la vida marina.",
        "activity_type": "Voluntariado",
        "organizer": "Mar Limpio",
        "max_capacity": 50,
    },
    {
        "name": "Mercado de Productos Locales",
        "days_ahead": 5,
        "venue": "Plaza Mayor, Valencia",
        "description": "Productos frescos y locales. Apoya a productores de la zona y reduce la huella de carbono de tus alimentos.",
        "activity_type": "Mercado",
        "organizer": "Valencia Local",
        "max_capacity": 200,
    },
    {
        "name": "Webinar: Energías Renovables",
        "days_ahead": 10,
        "venue": "Online (Zoom)",
        "description": "Las últimas tendencias en energías renovables y cómo aplicarlas en tu hogar o negocio.",
        "activity_type": "Webinar",
        "organizer": "Energía Verde",
        "max_capacity": 150,
    },
]


async def _is_empty(db: AsyncSession, model) -> bool:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one() == 0


async def seed_faqs(db: AsyncSession) -> int:
    if not await _is_empty(db, Faq):
        logger.info("FAQ table already populated, skipping.")
        return 0
    for position, entry in enumerate(FAQ_SEED, start=1):
        db.add(Faq(order=position, active=True, **entry))
    await db.commit()
    return len(FAQ_SEED)


async def seed_events(db: AsyncSession, today: Optional[date] = None) -> int:
    if not await _is_empty(db, Event):
        logger.info("Event table already populated, skipping.")
        return 0
    today = today or date.today()
    for entry in EVENT_SEED:
        fields = dict(entry)
        days_ahead = fields.pop("days_ahead")
        db.add(Event(date=today + timedelta(days=days_ahead), status=EventStatus.active, **fields))
    await db.commit()
    return len(EVENT_SEED)


async def run_seed() -> None:
    await init_models()
    async with AsyncSessionLocal() as db:
        faq_count = await seed_faqs(db)
        event_count = await seed_events(db)
    logger.info(f"Seeded {faq_count} FAQ(s) and {event_count} event(s).")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_seed())
