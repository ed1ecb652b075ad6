from discord.ext import commands

from . import util
from .. import equations


def clean_expression(expression):
    '''
    Strips quotes and all whitespace from an expression
    '''
    return ''.join(util.strip_quotes(expression.strip()).split())


def format_result(value):
    '''
    Shows integral results without a decimal part
    '''
    if value % 1 == 0:
        value = int(value)
    return str(value)


def do_calc(expression, output=None):
    '''
    Evaluates an expression, recording the working in output
    '''
    if output is None:
        output = []
    expression = clean_expression(expression)
    output.append('`{}`'.format(expression))
    output.append('`{}`'.format(equations.postfix_text(expression)))
    value = equations.evaluate(expression)
    output.append('= {}'.format(format_result(value)))
    return value


class CalcCog (util.Cog):
    @commands.group('calc', aliases=['c', 'eval'], invoke_without_command=True)
    async def group(self, ctx, *, expression: str):
        '''
        Evaluates an arithmetic expression

        Parameters:
        [expression*] the expression to evaluate
            whitespace is ignored

        Operations from highest precedence to lowest:

        * : multiplication
        / : division, groups right to left

        + : addition
        - : subtraction, groups right to left

        Parentheses group operations as usual
        Only whole numbers are accepted, there are no unary operators
        '''
        output = []
        do_calc(expression, output=output)
        await util.send_embed(ctx, author=ctx.author, description='\n'.join(output))

    @group.command(aliases=['rpn'])
    async def postfix(self, ctx, *, expression: str):
        '''
        Shows an expression in postfix (reverse polish) order

        Parameters:
        [expression*] the expression to convert
        '''
        expression = clean_expression(expression)
        await ctx.send('`{}`'.format(equations.postfix_text(expression)))


async def setup(bot):
    await bot.add_cog(CalcCog(bot))
