"""
handlers/job_handler.py
-----------------------
Scheduler entry point for the daily briefing.
"""

from telegram import Bot
from telegram.ext import ContextTypes

from handlers.sender import send_messages
from services.daily_job import DailyBriefingJob
from utils.logger import get_logger

logger = get_logger(__name__)


async def run_daily_job(job: DailyBriefingJob, bot: Bot) -> None:
    """
    Build and send today's briefing.

    Never raises: the scheduler may invoke this more than once a day and a
    failed run must not affect the next one.
    """
    try:
        message = await job.build()
        if message is None:
            logger.warning("Daily briefing skipped: no data from any provider.")
            return
        await send_messages(bot, job.chat_id, [message])
        logger.info(f"Daily briefing sent to chat {job.chat_id}")
    except Exception as e:
        logger.exception(f"Daily briefing failed: {e}")


async def send_daily_briefing(context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Scheduled job: send the good-morning briefing.
    The DailyBriefingJob is attached as the job's data in main.py.
    """
    await run_daily_job(context.job.data, context.bot)
