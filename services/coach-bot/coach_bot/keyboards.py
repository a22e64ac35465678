from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup, WebAppInfo


def web_app_keyboard(text: str, url: str) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text=text, web_app=WebAppInfo(url=url))]])
