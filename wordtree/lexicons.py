#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: lexicons.py
# Author: Wadih Khairallah
# Description: Bundled Portuguese lexicons and loaders for user supplied ones
# Created: 2025-06-02 10:14:51
# Modified: 2025-06-09 18:22:07

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Tuple, Union

import nltk

logger = logging.getLogger(__name__)

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"
CATEGORIES = (POSITIVE, NEGATIVE, NEUTRAL)

PORTUGUESE_STOPWORDS: FrozenSet[str] = frozenset([
    "de", "a", "o", "que", "e", "do", "da", "em", "um", "para", "é", "com",
    "não", "uma", "os", "no", "se", "na", "por", "mais", "as", "dos", "como",
    "mas", "foi", "ao", "ele", "das", "tem", "à", "seu", "sua", "ou", "ser",
    "quando", "muito", "há", "nos", "já", "está", "eu", "também", "só",
    "pelo", "pela", "até", "isso", "ela", "entre", "era", "depois", "sem",
    "mesmo", "aos", "ter", "seus", "quem", "nas", "me", "esse", "eles",
    "estão", "você", "tinha", "foram", "essa", "num", "nem", "suas", "meu",
    "às", "minha", "têm", "numa", "pelos", "elas", "havia", "seja", "qual",
    "será", "nós", "tenho", "lhe", "deles", "essas", "esses", "pelas",
    "este", "fosse", "dele", "tu", "te", "vocês", "vos", "lhes", "meus",
    "minhas", "teu", "tua", "teus", "tuas", "nosso", "nossa", "nossos",
    "nossas", "dela", "delas", "esta", "estes", "estas", "aquele", "aquela",
    "aqueles", "aquelas", "isto", "aquilo", "sobre", "onde", "quais", "quão",
    "quanta", "quantas", "quanto", "quantos",
])

# word -> (category, intensity); intensity runs 1 (mild) to 3 (strong)
_SENTIMENT_ENTRIES: Dict[str, Tuple[str, int]] = {
    # positive
    "bom": (POSITIVE, 1),
    "boa": (POSITIVE, 1),
    "bons": (POSITIVE, 1),
    "boas": (POSITIVE, 1),
    "ótimo": (POSITIVE, 2),
    "ótima": (POSITIVE, 2),
    "excelente": (POSITIVE, 3),
    "excepcional": (POSITIVE, 3),
    "incrível": (POSITIVE, 3),
    "incríveis": (POSITIVE, 3),
    "fantástico": (POSITIVE, 3),
    "fantástica": (POSITIVE, 3),
    "fantásticos": (POSITIVE, 3),
    "fantásticas": (POSITIVE, 3),
    "maravilhoso": (POSITIVE, 3),
    "maravilhosa": (POSITIVE, 3),
    "maravilhosas": (POSITIVE, 3),
    "extraordinárias": (POSITIVE, 3),
    "extraordinário": (POSITIVE, 3),
    "brilhante": (POSITIVE, 2),
    "brilhantes": (POSITIVE, 2),
    "revolucionárias": (POSITIVE, 2),
    "inovador": (POSITIVE, 2),
    "inovadora": (POSITIVE, 2),
    "inovadoras": (POSITIVE, 2),
    "eficiente": (POSITIVE, 2),
    "eficientes": (POSITIVE, 2),
    "sofisticados": (POSITIVE, 1),
    "poderosos": (POSITIVE, 2),
    "valioso": (POSITIVE, 2),
    "valiosos": (POSITIVE, 2),
    "próspero": (POSITIVE, 2),
    "prósperas": (POSITIVE, 2),
    "impressionante": (POSITIVE, 2),
    "robusta": (POSITIVE, 1),
    "confiável": (POSITIVE, 2),
    "avançados": (POSITIVE, 1),
    "surpreendentes": (POSITIVE, 2),
    "precisas": (POSITIVE, 1),
    "precisos": (POSITIVE, 1),
    "harmoniosa": (POSITIVE, 2),
    "integrados": (POSITIVE, 1),
    "segurança": (POSITIVE, 1),
    "transparência": (POSITIVE, 1),
    "imersivas": (POSITIVE, 1),
    "educativas": (POSITIVE, 1),
    "benefícios": (POSITIVE, 2),
    "responsáveis": (POSITIVE, 1),
    "oportunidades": (POSITIVE, 2),
    "importantes": (POSITIVE, 1),
    "qualidade": (POSITIVE, 1),
    "adequada": (POSITIVE, 1),
    "inteligente": (POSITIVE, 1),
    "inteligentes": (POSITIVE, 1),
    "feliz": (POSITIVE, 2),
    "felizes": (POSITIVE, 2),
    "alegria": (POSITIVE, 2),
    "amor": (POSITIVE, 3),
    "sucesso": (POSITIVE, 2),
    "vitória": (POSITIVE, 2),
    "lindo": (POSITIVE, 2),
    "linda": (POSITIVE, 2),
    "perfeito": (POSITIVE, 3),
    "perfeita": (POSITIVE, 3),
    "positivo": (POSITIVE, 1),
    "positiva": (POSITIVE, 1),
    "esperança": (POSITIVE, 2),
    "gosto": (POSITIVE, 1),
    "adoro": (POSITIVE, 3),
    "melhor": (POSITIVE, 2),
    "melhores": (POSITIVE, 2),
    "fácil": (POSITIVE, 1),
    "agradável": (POSITIVE, 2),
    "divertido": (POSITIVE, 2),
    # negative
    "mau": (NEGATIVE, 1),
    "má": (NEGATIVE, 1),
    "ruim": (NEGATIVE, 2),
    "ruins": (NEGATIVE, 2),
    "péssimo": (NEGATIVE, 3),
    "péssima": (NEGATIVE, 3),
    "terrível": (NEGATIVE, 3),
    "horrível": (NEGATIVE, 3),
    "infelizmente": (NEGATIVE, 1),
    "problema": (NEGATIVE, 2),
    "problemas": (NEGATIVE, 2),
    "preocupante": (NEGATIVE, 2),
    "preocupantes": (NEGATIVE, 2),
    "complexas": (NEGATIVE, 1),
    "risco": (NEGATIVE, 2),
    "riscos": (NEGATIVE, 2),
    "ameaça": (NEGATIVE, 2),
    "ameaças": (NEGATIVE, 2),
    "sérias": (NEGATIVE, 1),
    "dano": (NEGATIVE, 2),
    "danos": (NEGATIVE, 2),
    "ansiedade": (NEGATIVE, 2),
    "isolamento": (NEGATIVE, 2),
    "prejudicial": (NEGATIVE, 3),
    "desafios": (NEGATIVE, 1),
    "dependência": (NEGATIVE, 1),
    "excessiva": (NEGATIVE, 1),
    "triste": (NEGATIVE, 2),
    "tristeza": (NEGATIVE, 2),
    "medo": (NEGATIVE, 2),
    "raiva": (NEGATIVE, 3),
    "ódio": (NEGATIVE, 3),
    "fracasso": (NEGATIVE, 2),
    "falha": (NEGATIVE, 2),
    "erro": (NEGATIVE, 1),
    "erros": (NEGATIVE, 1),
    "perigo": (NEGATIVE, 2),
    "perigoso": (NEGATIVE, 2),
    "difícil": (NEGATIVE, 1),
    "pior": (NEGATIVE, 2),
    "piores": (NEGATIVE, 2),
    "negativo": (NEGATIVE, 1),
    "negativa": (NEGATIVE, 1),
    "crise": (NEGATIVE, 2),
    "dor": (NEGATIVE, 2),
    "morte": (NEGATIVE, 3),
    "guerra": (NEGATIVE, 3),
    "doença": (NEGATIVE, 2),
    "corrupção": (NEGATIVE, 3),
    "violência": (NEGATIVE, 3),
}

PORTUGUESE_SENTIMENT: Mapping[str, Tuple[str, int]] = MappingProxyType(_SENTIMENT_ENTRIES)

SAMPLE_TEXT = """A inteligência artificial está transformando o mundo de maneiras extraordinárias e revolucionárias.
Desde assistentes virtuais incríveis até carros autônomos fantásticos, a tecnologia está criando soluções inovadoras.
Machine learning e deep learning são tecnologias brilhantes que processam dados de forma eficiente.
Algoritmos sofisticados e poderosos geram insights valiosos para empresas prósperas.
A automação inteligente está criando oportunidades maravilhosas no mercado de trabalho.
Redes neurais artificiais simulam o funcionamento do cérebro humano de maneira impressionante.
A computação em nuvem oferece infraestrutura robusta e confiável para processar algoritmos avançados.
Big data e analytics permitem descobertas surpreendentes e análises precisas.
A internet das coisas conecta dispositivos de forma harmoniosa em ecossistemas digitais integrados.
Blockchain garante segurança excepcional e transparência total para transações digitais.
Realidade virtual e aumentada criam experiências imersivas e educativas fantásticas.
Infelizmente, alguns desafios persistem como problemas de privacidade preocupantes e questões éticas complexas.
Riscos de segurança cibernética representam ameaças sérias que podem causar danos significativos.
A dependência excessiva da tecnologia pode gerar ansiedade e isolamento social prejudicial.
Entretanto, os benefícios superam os riscos quando implementamos soluções responsáveis e éticas.
Os dados são fundamentais para o desenvolvimento de algoritmos inteligentes. Dados de qualidade geram insights precisos.
Quando analisamos dados corretamente, descobrimos padrões importantes. Os dados revelam tendências ocultas no mercado.
Dados estruturados facilitam a análise automatizada. Dados não estruturados requerem processamento especial.
A coleta de dados deve seguir princípios éticos rigorosos. Dados pessoais precisam de proteção adequada.
Algoritmos de machine learning aprendem com dados históricos para fazer previsões futuras.
Modelos de deep learning processam grandes volumes de dados para reconhecer padrões complexos.
A qualidade dos dados determina a precisão dos resultados dos algoritmos de inteligência artificial."""


def load_stopwords(
    path: Union[str, Path]
) -> FrozenSet[str]:
    """
    Read a stopword list, one word per line.

    Blank lines and lines starting with '#' are ignored.

    Args:
        path (str | Path): Path to the stopword file.

    Returns:
        FrozenSet[str]: Lowercased stopwords.
    """
    lines = Path(path).expanduser().read_text(encoding="utf-8").splitlines()
    words = frozenset(
        line.strip().lower()
        for line in lines
        if line.strip() and not line.strip().startswith("#")
    )
    logger.debug(f"Loaded {len(words)} stopwords from {path}")
    return words


def _parse_sentiment_entry(word: str, value: Any) -> Tuple[str, int]:
    if isinstance(value, bool):
        raise ValueError(f"Invalid sentiment value for '{word}': {value!r}")

    if isinstance(value, (int, float)):
        if value > 0:
            return POSITIVE, abs(value)
        if value < 0:
            return NEGATIVE, abs(value)
        return NEUTRAL, 0

    if isinstance(value, (list, tuple)) and len(value) == 2:
        category, intensity = value
        if category not in CATEGORIES:
            raise ValueError(f"Unknown sentiment category for '{word}': {category!r}")
        if isinstance(intensity, bool) or not isinstance(intensity, (int, float)):
            raise ValueError(f"Invalid intensity for '{word}': {intensity!r}")
        return category, abs(intensity)

    raise ValueError(f"Invalid sentiment value for '{word}': {value!r}")


def load_sentiment_lexicon(
    path: Union[str, Path]
) -> Mapping[str, Tuple[str, int]]:
    """
    Read a polarity lexicon from a JSON object.

    Each value is either a signed number (sign gives the category, magnitude
    the intensity) or a ``[category, intensity]`` pair.

    Args:
        path (str | Path): Path to the JSON lexicon.

    Returns:
        Mapping[str, Tuple[str, int]]: Read-only word -> (category, intensity) map.

    Raises:
        ValueError: When the file is not a JSON object or an entry is malformed.
    """
    try:
        data = json.loads(Path(path).expanduser().read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid sentiment lexicon {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Sentiment lexicon {path} must be a JSON object")

    lexicon = {
        str(word).strip().lower(): _parse_sentiment_entry(word, value)
        for word, value in data.items()
    }
    logger.debug(f"Loaded {len(lexicon)} sentiment entries from {path}")
    return MappingProxyType(lexicon)


def nltk_stopwords(language: str = "portuguese") -> FrozenSet[str]:
    """
    Stopwords from the NLTK corpus for the given language.

    Downloads the corpus on first use.
    """
    try:
        nltk.data.find('corpora/stopwords')
    except LookupError:
        nltk.download('stopwords', quiet=True)

    try:
        words = nltk.corpus.stopwords.words(language)
    except OSError as e:
        raise ValueError(f"No NLTK stopwords for language '{language}'") from e

    return frozenset(word.lower() for word in words)
