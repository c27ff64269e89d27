"""Keyword rules for the restaurant chatbot.

Rules are checked in order and the first match answers. Several rules can
match the same message, so the order below is significant.
"""
from typing import Callable, List, Optional
from pydantic import BaseModel

from app.core.config import settings
from app.services.cart.models import CartState
from app.services.chatbot.constants import (
    DIETARY_OPTIONS,
    GREETING_PREFIXES,
    POPULAR_ITEMS,
)
from app.services.menu.base import MenuItem


class ChatContext(BaseModel):
    """What the bot can see when answering."""

    cart: CartState
    menu_items: List[MenuItem] = []

    def item_names(self, category: str) -> str:
        return ", ".join(i.name for i in self.menu_items if i.category.value == category)


class BotReply(BaseModel):
    content: str
    suggestions: List[str] = []


class ChatRule:
    """A (predicate, responder) pair."""

    def __init__(
        self,
        name: str,
        matches: Callable[[str], bool],
        respond: Callable[[ChatContext], BotReply],
    ):
        self.name = name
        self.matches = matches
        self.respond = respond


def contains_any(*keywords: str) -> Callable[[str], bool]:
    """Predicate matching messages that contain any of the keywords."""
    return lambda message: any(keyword in message for keyword in keywords)


def starts_with_any(*prefixes: str) -> Callable[[str], bool]:
    return lambda message: message.startswith(prefixes)


def _reply(content: str, *suggestions: str) -> Callable[[ChatContext], BotReply]:
    return lambda context: BotReply(content=content, suggestions=list(suggestions))


def _starters(context: ChatContext) -> BotReply:
    return BotReply(
        content=(
            f"Our starters include: {context.item_names('starters')}. "
            "These are perfect to begin your culinary journey with us!"
        ),
        suggestions=["Add Truffle Arancini", "Add Burrata Salad", "Show me mains"],
    )


def _mains(context: ChatContext) -> BotReply:
    return BotReply(
        content=(
            f"Our main courses include: {context.item_names('mains')}. "
            "Each dish is crafted with passion and the finest ingredients!"
        ),
        suggestions=["Add Wagyu Beef Burger", "Add Lobster Risotto", "Show me desserts"],
    )


def _desserts(context: ChatContext) -> BotReply:
    return BotReply(
        content=(
            f"Indulge in our desserts: {context.item_names('desserts')}. "
            "The perfect ending to your meal!"
        ),
        suggestions=["Add Chocolate Lava Cake", "Add Tiramisu", "Show me drinks"],
    )


def _hours(context: ChatContext) -> BotReply:
    return BotReply(
        content=f"We're open {settings.restaurant_hours}. We look forward to serving you!",
        suggestions=["Make a reservation", "Do you deliver?", "Show me the menu"],
    )


def _location(context: ChatContext) -> BotReply:
    return BotReply(
        content=(
            f"We're located at {settings.restaurant_location}. "
            f"You can also reach us at {settings.restaurant_phone}."
        ),
        suggestions=["Make a reservation", "Do you deliver?", "Show me the menu"],
    )


def _cart(context: ChatContext) -> BotReply:
    cart = context.cart
    if cart.total_items == 0:
        return BotReply(
            content="Your cart is empty. Would you like to browse our menu and add some delicious items?",
            suggestions=["Show me the menu", "What are your specials?", "Show starters"],
        )
    return BotReply(
        content=(
            f"You have {cart.total_items} item(s) in your cart with a total of "
            f"${cart.total_amount:.2f}. Ready to checkout?"
        ),
        suggestions=["View cart", "Checkout", "Add more items", "Clear cart"],
    )


HELP_TEXT = """I'm here to help! I can assist you with:
• Browsing our menu
• Checking your cart
• Making reservations
• Answering questions about dietary options
• Providing information about hours and location

What would you like to know?"""

FALLBACK = BotReply(
    content=(
        "I'm not sure I understood that correctly. I can help you with our menu, "
        "taking orders, making reservations, or answering questions about our "
        "restaurant. What would you like to do?"
    ),
    suggestions=["Show me the menu", "Make a reservation", "Check my cart", "Get help"],
)

RULES = [
    ChatRule(
        "greeting",
        starts_with_any(*GREETING_PREFIXES),
        _reply(
            "Hello! Welcome to our restaurant! I'm your virtual assistant. How can I help you today?",
            "Show me the menu", "What are your hours?", "Do you have vegetarian options?", "Check my cart",
        ),
    ),
    ChatRule(
        "menu",
        contains_any("menu", "food", "dishes"),
        _reply(
            "We offer a variety of delicious dishes across categories: Starters, Mains, "
            "Desserts, and Drinks. Our most popular items include "
            f"{', '.join(POPULAR_ITEMS)}. Would you like to see a specific category?",
            "Show starters", "Show mains", "Show desserts", "Show drinks", "What are your specials?",
        ),
    ),
    ChatRule("starters", contains_any("starter", "appetizer"), _starters),
    ChatRule("mains", contains_any("main", "entree"), _mains),
    ChatRule("desserts", contains_any("dessert", "sweet"), _desserts),
    ChatRule(
        "drinks",
        contains_any("drink", "beverage"),
        _reply(
            "We offer a selection of refreshing drinks including craft cocktails, wines, "
            "beers, and non-alcoholic beverages.",
            "Show cocktails", "Show wines", "Show non-alcoholic drinks",
        ),
    ),
    ChatRule(
        "vegetarian",
        contains_any("vegetarian", "veggie"),
        _reply(
            "Yes, we have several vegetarian options including: "
            f"{', '.join(DIETARY_OPTIONS['vegetarian'])}. "
            "Would you like to add any of these to your cart?",
            "Add Burrata Salad", "Add Margherita Pizza", "Show all vegetarian options",
        ),
    ),
    ChatRule(
        "vegan",
        contains_any("vegan"),
        _reply(
            f"We have vegan options available: {', '.join(DIETARY_OPTIONS['vegan'])}. "
            "Our chefs can also modify certain dishes to be vegan-friendly!",
            "Add Vegan Burger", "Add Garden Salad", "What can be made vegan?",
        ),
    ),
    ChatRule(
        "gluten_free",
        contains_any("gluten free", "gluten-free"),
        _reply(
            f"We offer gluten-free options including: {', '.join(DIETARY_OPTIONS['gluten_free'])}. "
            "Please inform your server about any allergies.",
            "Add Grilled Salmon", "Add Burrata Salad", "Show all gluten-free options",
        ),
    ),
    ChatRule("hours", contains_any("hour", "open", "time"), _hours),
    ChatRule("location", contains_any("location", "address", "where"), _location),
    ChatRule("cart", contains_any("cart", "bag", "basket"), _cart),
    ChatRule(
        "reservation",
        contains_any("reservation", "book", "table"),
        _reply(
            "You can make a reservation through our reservation page. We recommend "
            "booking in advance for weekends and special occasions!",
            "Make a reservation", "Check availability", "Show me the menu",
        ),
    ),
    ChatRule(
        "delivery",
        contains_any("deliver", "takeaway", "pickup"),
        _reply(
            "Yes, we offer both delivery and takeaway options! You can place your order "
            "here and choose your preferred option at checkout.",
            "Show me the menu", "Check my cart", "How long does delivery take?",
        ),
    ),
    ChatRule(
        "pricing",
        contains_any("price", "cost", "expensive"),
        _reply(
            "Our prices range from $8 for starters to $45 for premium mains. "
            "We offer great value for the quality and experience!",
            "Show me the menu", "Do you have any deals?", "What are your specials?",
        ),
    ),
    ChatRule(
        "specials",
        contains_any("special", "deal", "offer", "discount"),
        _reply(
            "Today's specials include our Chef's Signature Wagyu Burger and Lobster Risotto. "
            "We also have a happy hour from 4-6 PM with 20% off all drinks!",
            "Add Wagyu Beef Burger", "Add Lobster Risotto", "Show me the full menu",
        ),
    ),
    ChatRule(
        "allergies",
        contains_any("allerg", "nut", "dairy", "shellfish"),
        _reply(
            "We take allergies very seriously. Please inform us of any allergies when "
            "ordering, and our chefs will ensure your meal is prepared safely. Would you "
            "like to know about specific ingredients in any dish?",
            "Show allergen information", "Contact staff", "Show me the menu",
        ),
    ),
    ChatRule(
        "help",
        contains_any("help", "assist", "support"),
        _reply(HELP_TEXT, "Show me the menu", "Make a reservation", "Contact human support"),
    ),
    ChatRule(
        "thanks",
        contains_any("thank", "thanks"),
        _reply(
            "You're very welcome! It's my pleasure to assist you. Enjoy your dining experience with us!",
            "Show me the menu", "Make a reservation", "Goodbye",
        ),
    ),
    ChatRule(
        "goodbye",
        contains_any("bye", "goodbye", "see you"),
        _reply("Goodbye! Thank you for choosing our restaurant. Have a wonderful day!"),
    ),
]


def find_rule(message: str) -> Optional[ChatRule]:
    """Return the first rule matching a message, or None."""
    message_lower = message.lower()
    for rule in RULES:
        if rule.matches(message_lower):
            return rule
    return None


def reply_for(rule: Optional[ChatRule], context: ChatContext) -> BotReply:
    """Build the reply of an already matched rule, or the fallback for None."""
    if rule is None:
        return FALLBACK.model_copy(deep=True)
    return rule.respond(context)


def generate_reply(message: str, context: ChatContext) -> BotReply:
    """Answer a message with the first rule that matches it."""
    return reply_for(find_rule(message), context)
