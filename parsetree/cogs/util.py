import discord
from discord.ext import commands


class Cog (commands.Cog):
    def __init__(self, bot):
        self.bot = bot


def strip_quotes(arg):
    '''
    Strips quotes from arguments
    '''
    if len(arg) >= 2 and arg.startswith('"') and arg.endswith('"'):
        arg = arg[1:-1]
    return arg


async def send_embed(ctx, *, author=None, description=None):
    '''
    Creates and sends an embed
    '''
    embed = discord.Embed()
    if description is not None:
        embed.description = description
    if author is not None:
        embed.color = author.color
        embed.set_author(name=author.display_name, icon_url=author.display_avatar.url)
    await ctx.send(embed=embed)
