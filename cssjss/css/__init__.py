"""
References:
    - [syntax](https://www.w3.org/TR/css-syntax-3/)
    - [basics](https://developer.mozilla.org/en-US/docs/Learn/CSS/First_steps/How_CSS_is_structured)
    - [@media](https://developer.mozilla.org/en-US/docs/Web/CSS/@media)
    - [@font-face](https://developer.mozilla.org/en-US/docs/Web/CSS/@font-face)
    - [@keyframes](https://developer.mozilla.org/en-US/docs/Web/CSS/@keyframes)

<comment></comment>
<at-rule/>
<ruleset>
    <selector/> <block>
        <property/>: <value/>;
    </block>
</ruleset>

text -> Lexer -> tokens -> Parser -> Stylesheet(rules=[Rule, MediaRule, ...])
"""

from cssjss.css.lexer import Lexer, ParseError
from cssjss.css.parser import Parse, Parser, parse
from cssjss.css.rules import *
