import hypothesis.strategies as st

from _streamtok.tokenizer.orphan_behavior import OrphanBehavior
from _streamtok.tokenizer.stream_tokenizer import StreamTokenizer
from _streamtok.tokenizer.token import Token

values = st.lists(st.integers(min_value=-5, max_value=5), min_size=1)
thresholds = st.integers(min_value=-6, max_value=6)
orphan_behaviors = st.sampled_from(list(OrphanBehavior))


class EchoTokenizer(StreamTokenizer):
    """
    Produces one token per value.
    """

    def on_next_value(self, value):
        self.tokens.append(Token(value, self.position))


@st.composite
def source_text(draw):
    """
    Text mixing lines, tabs and spaces together with an offset into it.
    """
    text = draw(st.text(alphabet="ab \t\n", min_size=0, max_size=30))
    offset = draw(st.integers(min_value=0, max_value=len(text)))
    return text, offset
