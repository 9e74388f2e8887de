from policy_repro.core.generators.baseline_gen import get_baseline_code
from policy_repro.core.generators.header_gen import get_header_code
from policy_repro.core.generators.implementation_gen import get_implementation_code
from policy_repro.core.generators.reform_gen import get_reform_code
from policy_repro.core.generators.repro_code import get_reproducibility_code_block, render_script
from policy_repro.core.generators.situation_gen import get_situation_code

__all__ = [
    "get_baseline_code",
    "get_header_code",
    "get_implementation_code",
    "get_reform_code",
    "get_reproducibility_code_block",
    "get_situation_code",
    "render_script",
]
