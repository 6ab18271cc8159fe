"""Fixed segment script for the broken-timeline story.

The script opens mid-chaos in the present and interleaves the three
temporal layers (A, B, C, A, B, C, A). Placeholders use ``str.format``
syntax and must name ``StoryInputs`` fields; the script is checked when
this module is imported.
"""

from dataclasses import dataclass
from string import Formatter
from typing import Dict, FrozenSet, Tuple

from brokentimeline.models import StoryInputs, TemporalLayer


@dataclass(frozen=True)
class SegmentTemplate:
    """Title and body prose for one segment"""
    id: str
    layer: TemporalLayer
    title: str
    body: str

    @property
    def placeholders(self) -> FrozenSet[str]:
        """Names of the input fields this template consumes"""
        return _placeholders(self.title) | _placeholders(self.body)

    def render(self, fields: Dict[str, str]) -> Tuple[str, str]:
        """Substitute fields into title and body (single pass)"""
        return self.title.format_map(fields), self.body.format_map(fields)


def _placeholders(text: str) -> FrozenSet[str]:
    return frozenset(name for _, name, _, _ in Formatter().parse(text) if name is not None)


STORY_SCRIPT: Tuple[SegmentTemplate, ...] = (
    SegmentTemplate(
        id="presente-ruptura",
        layer=TemporalLayer.PRESENT,
        title="O instante em que tudo rompe",
        body=(
            "{protagonist} está de joelhos quando o caos começa: {chaos_trigger}. "
            "O eco atravessa {setting} e derruba as velas do altar. Nas mãos, o único "
            "objeto que não treme, {spiritual_symbol}. Do alto da escada, "
            "{ambiguous_figure} observa sem dizer nada, e {confidant} ainda não chegou."
        ),
    ),
    SegmentTemplate(
        id="recente-confissao",
        layer=TemporalLayer.RECENT_PAST,
        title="Três noites antes: a confissão a {confidant}",
        body=(
            "Três noites antes, {protagonist} bateu à porta de {confidant} com a voz "
            "partida. Falou de passos no corredor vazio e de um nome sussurrado nas "
            "orações. {confidant} ouviu tudo, mas percebeu que havia algo mais guardado, "
            "algo ligado a {hidden_guilt}, que {protagonist} não conseguia pronunciar."
        ),
    ),
    SegmentTemplate(
        id="distante-origem",
        layer=TemporalLayer.DISTANT_PAST,
        title="Anos atrás: a origem de {spiritual_symbol}",
        body=(
            "Muito antes de {setting} se tornar refúgio, {protagonist} era apenas uma "
            "criança diante de um portão de ferro. Foi ali que recebeu {spiritual_symbol} "
            "como promessa de proteção. Foi ali também que escolheu {hidden_guilt}, e o "
            "silêncio daquela escolha nunca mais se desfez."
        ),
    ),
    SegmentTemplate(
        id="presente-figura",
        layer=TemporalLayer.PRESENT,
        title="{ambiguous_figure} desce a escada",
        body=(
            "No presente, {ambiguous_figure} atravessa a nave enquanto o caos continua: "
            "{chaos_trigger}. Estende a mão para {spiritual_symbol} e diz que conhece o "
            "segredo. {protagonist} recua. {confidant} finalmente surge na porta, sem "
            "saber se deve intervir ou deixar a verdade vir à tona."
        ),
    ),
    SegmentTemplate(
        id="recente-aviso",
        layer=TemporalLayer.RECENT_PAST,
        title="Na véspera: o aviso de {ambiguous_figure}",
        body=(
            "Na véspera, {ambiguous_figure} deixou um bilhete sob a porta da cela de "
            "{protagonist}: “Quem carrega {spiritual_symbol} não pode mentir dentro "
            "destas paredes.” {protagonist} queimou o papel, mas as palavras ficaram. "
            "Naquela mesma noite, {confidant} viu luzes acesas onde ninguém deveria "
            "estar, nos limites de {setting}."
        ),
    ),
    SegmentTemplate(
        id="distante-culpa",
        layer=TemporalLayer.DISTANT_PAST,
        title="A escolha que ninguém deveria ter visto",
        body=(
            "A memória volta inteira: a chuva, o medo e a decisão de {hidden_guilt}. "
            "Havia uma testemunha. {ambiguous_figure}, ainda jovem, viu tudo e guardou "
            "silêncio por todos esses anos. O que {protagonist} chamou de fé era, desde "
            "o início, uma forma de penitência."
        ),
    ),
    SegmentTemplate(
        id="presente-desfecho",
        layer=TemporalLayer.PRESENT,
        title="O último eco",
        body=(
            "{protagonist} ergue {spiritual_symbol} diante de todos e, pela primeira vez, "
            "confessa: {hidden_guilt}. O caos cessa de uma vez. {confidant} segura sua "
            "mão. {ambiguous_figure} sorri como quem esperava por isso há anos, e "
            "{setting} volta ao silêncio, mas ninguém ali é mais o mesmo. A história de "
            "{title} termina onde começou: no meio da ruptura."
        ),
    ),
)


def _validate_script(script: Tuple[SegmentTemplate, ...]) -> None:
    known = set(StoryInputs.field_names())
    seen_ids = set()
    for template in script:
        unknown = template.placeholders - known
        if unknown:
            raise ValueError(f"Template {template.id} uses unknown fields: {sorted(unknown)}")
        if template.id in seen_ids:
            raise ValueError(f"Duplicate template id: {template.id}")
        seen_ids.add(template.id)


_validate_script(STORY_SCRIPT)
