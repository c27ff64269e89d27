"""Canned knowledge for the restaurant chatbot."""

POPULAR_ITEMS = [
    "Wagyu Beef Burger",
    "Lobster Risotto",
    "Chocolate Lava Cake",
    "Truffle Arancini",
]

DIETARY_OPTIONS = {
    "vegetarian": ["Burrata Salad", "Margherita Pizza", "Vegetable Pasta"],
    "vegan": ["Garden Salad", "Vegan Burger"],
    "gluten_free": ["Grilled Salmon", "Burrata Salad"],
}

WELCOME_MESSAGE = (
    "Hi there! Welcome to our restaurant! I'm here to help you with our menu, "
    "orders, reservations, and any questions you might have. "
    "How can I assist you today?"
)

WELCOME_SUGGESTIONS = [
    "Show me the menu",
    "What are your hours?",
    "Make a reservation",
    "Check my cart",
]

# Message prefixes treated as a greeting
GREETING_PREFIXES = [
    "hi",
    "hello",
    "hey",
    "good morning",
    "good afternoon",
    "good evening",
]
