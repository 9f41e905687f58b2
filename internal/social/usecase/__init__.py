from .new import New
from .social import SocialUseCase
from .lexicon import load_lexicon, parse_lexicon

__all__ = ["New", "SocialUseCase", "load_lexicon", "parse_lexicon"]
