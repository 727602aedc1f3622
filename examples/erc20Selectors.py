# erc20Selectors.py
#
# parse the human-readable signatures of an ERC-20 token, and show the
# canonical form used to compute each function selector
#
from mo_logs import Log

from mo_signature import parse_signature

signatures = [
    "totalSupply()",
    "balanceOf(address owner)",
    "transfer(address to,uint256 amount)",
    "transferFrom(address,address,uint256)",
    "approve(address spender,uint256 amount)",
    "allowance(address,address)",
]

parsed = [parse_signature(s) for s in signatures]

for sig in parsed:
    Log.note(
        "{{canonical}} takes {{names}}",
        canonical=sig.canonical,
        names=", ".join(i.name for i in sig.inputs) or "nothing",
    )
