import unittest
from types import SimpleNamespace

from parsetree.cogs import calc
from parsetree.cogs.util import send_embed, strip_quotes
from parsetree.equations import DivisionByZero


class TestCalcHelpers(unittest.TestCase):
    def test_strip_quotes(self):
        self.assertEqual(strip_quotes('"1+2"'), '1+2')
        self.assertEqual(strip_quotes('"'), '"')
        self.assertEqual(strip_quotes('1+2'), '1+2')

    def test_clean_expression(self):
        self.assertEqual(calc.clean_expression(' "(1 + 2) * 3" '), '(1+2)*3')
        self.assertEqual(calc.clean_expression('4\t/ 2'), '4/2')

    def test_format_result(self):
        self.assertEqual(calc.format_result(7.0), '7')
        self.assertEqual(calc.format_result(-10.0), '-10')
        self.assertEqual(calc.format_result(3.5), '3.5')

    def test_do_calc(self):
        output = []
        value = calc.do_calc('2 + 3 * 4', output=output)
        self.assertEqual(value, 14)
        self.assertEqual(output, ['`2+3*4`', '`2 3 4 * +`', '= 14'])

    def test_do_calc_error_keeps_working(self):
        output = []
        with self.assertRaises(DivisionByZero):
            calc.do_calc('1 / 0', output=output)
        self.assertEqual(output, ['`1/0`', '`1 0 /`'])


class FakeContext:
    def __init__(self):
        self.sent = []

    async def send(self, **kwargs):
        self.sent.append(kwargs)


class TestSendEmbed(unittest.IsolatedAsyncioTestCase):
    async def test_description(self):
        ctx = FakeContext()
        await send_embed(ctx, description='= 7')
        self.assertEqual(len(ctx.sent), 1)
        self.assertEqual(list(ctx.sent[0]), ['embed'])
        self.assertEqual(ctx.sent[0]['embed'].description, '= 7')

    async def test_author(self):
        ctx = FakeContext()
        author = SimpleNamespace(
            color=0x3366cc,
            display_name='Ada',
            display_avatar=SimpleNamespace(url='https://cdn.example.com/ada.png'))
        await send_embed(ctx, author=author, description='= 14')
        embed = ctx.sent[0]['embed']
        self.assertEqual(embed.author.name, 'Ada')
        self.assertEqual(embed.author.icon_url, 'https://cdn.example.com/ada.png')
        self.assertEqual(embed.color.value, 0x3366cc)


if __name__ == '__main__':
    unittest.main()
