import logging
import random
from collections.abc import Sequence

from app.core.config import get_settings
from app.models.schemas import AnswerResult, CipherType, Mode, PracticeChallenge
from app.services import catalog
from app.services.preprocessing.normalizer import NormalizationMode, TextNormalizer

logger = logging.getLogger(__name__)

_normalizer = TextNormalizer()


def generate_challenge(
    cipher_id: CipherType | str,
    rng: random.Random | None = None,
    messages: Sequence[str] | None = None,
) -> PracticeChallenge:
    """
    Build a practice challenge for a cipher.

    A message is drawn from `messages` (the configured practice messages
    by default), uppercased with its whitespace collapsed, and encrypted
    with parameters chosen by the engine.

    Args:
        cipher_id: Cipher to practise
        rng: Random source; pass a seeded one for repeatable challenges
        messages: Candidate plaintexts

    Returns:
        The challenge, including the plaintext needed to check answers
    """
    rng = rng or random.Random()
    messages = messages or get_settings().practice_messages

    engine = catalog.get_engine(cipher_id)
    plaintext = _normalizer.normalize(rng.choice(list(messages)), NormalizationMode.DISPLAY)
    params = engine.practice_params(rng)
    ciphertext = catalog.transform(engine.cipher_type, Mode.ENCRYPT, plaintext, params)

    logger.debug("practice challenge for %s with params=%r", engine.cipher_type.value, params)

    return PracticeChallenge(
        cipher_type=engine.cipher_type,
        ciphertext=ciphertext,
        params=params,
        plaintext=plaintext,
        points=engine.difficulty.points,
    )


def check_answer(answer: str, plaintext: str) -> bool:
    """Compare an answer to the plaintext, ignoring case and whitespace."""
    return _normalizer.answers_match(answer, plaintext)


def score_answer(cipher_id: CipherType | str, answer: str, plaintext: str) -> AnswerResult:
    """Award the cipher's difficulty points for a correct answer, 0 otherwise."""
    engine = catalog.get_engine(cipher_id)
    correct = check_answer(answer, plaintext)
    return AnswerResult(correct=correct, points=engine.difficulty.points if correct else 0)
