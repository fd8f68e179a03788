"""
Fixed reply text used by the pattern responders and the fallback selector.

Contextual banks are keyed by Theme, fallback banks by ConversationStage.
Every bank holds exactly five candidates.
"""

from typing import Dict, List

from confidant.conversation.context import ConversationStage, Theme


# ==============================================================================
# Greeting / Farewell
# ==============================================================================

GREETING_FIRST_TIME = "Good {part}! I'm here to listen and support you. How are you feeling today?"
GREETING_RETURNING = "Good {part}! Welcome back. How have you been since our last conversation?"

INTERJECTION_GREETING = "Hello! I'm here to listen and support you. How are you feeling today?"

FAREWELL = "Take care of yourself. Remember, I'm here if you need to talk again. Have a good day!"

# ==============================================================================
# Emotional State
# ==============================================================================

EMOTION_RESPONSES: Dict[str, str] = {
    "sad": "I hear that you're feeling sad. Would you like to talk about what's causing these feelings?",
    "happy": "I'm glad you're feeling happy. What's contributing to your positive mood?",
    "angry": "Feeling angry can be really challenging. Would you like to explore what triggered these feelings?",
    "anxious": "Anxiety can be really difficult to deal with. Would you like to talk about what's making you feel this way?",
    "depressed": "I hear that you're feeling depressed. Would you like to talk about what's on your mind?",
    "worried": "Worry can be really consuming. Would you like to explore what's causing these concerns?",
    "stressed": "Stress can be really overwhelming. Would you like to talk about what's causing this stress?",
    "overwhelmed": "Feeling overwhelmed can be really difficult. Would you like to break down what's happening?",
    "frustrated": "Frustration can be really challenging. Would you like to talk about what's causing this?",
    "lonely": "Loneliness can be really painful. Would you like to talk about what's making you feel this way?",
    "confused": "Confusion can be really unsettling. Would you like to explore what's unclear?",
    "excited": "I'm glad you're feeling excited! What's contributing to your enthusiasm?",
    "peaceful": "That's wonderful that you're feeling peaceful. What's helping you maintain this state?",
    "calm": "It's good that you're feeling calm. What's contributing to your sense of calm?",
}

# Only sadness has a dedicated variant when it keeps recurring.
EMOTION_PATTERN_RESPONSES: Dict[str, str] = {
    "sad": "I notice you've been feeling sad lately. Would you like to talk about what's been contributing to these feelings?",
}

# ==============================================================================
# Echo Templates
# ==============================================================================

FEELING_TEMPLATE = (
    "That's interesting that you feel {feeling}. Can you tell me more about what makes you "
    "feel this way? What situations or thoughts trigger these feelings?"
)

PROBLEM_TEMPLATE = (
    "I understand you're dealing with {problem}. How has this been affecting your daily life? "
    "What have you tried so far to address this?"
)

RECURRING_PROBLEM_TEMPLATE = (
    "I notice this concern about {problem} has come up before. Would you like to explore "
    "what's changed since we last discussed this?"
)

UNCERTAINTY_TEMPLATE = (
    "It's okay to feel uncertain about {uncertainty}. What have you tried so far to understand "
    "it better? What would help you feel more clear about this?"
)

DESIRE_TEMPLATE = (
    "You mentioned wanting {goal}. What would having that mean to you? How do you think it "
    "would improve your situation? What steps could you take toward this?"
)

THOUGHT_TEMPLATE = (
    "That's interesting that you think {thought}. What led you to this conclusion? "
    "How does this belief affect your actions?"
)

LIMITATION_TEMPLATE = (
    "You mentioned you can't {limitation}. What makes you feel this way? What have you tried so far?"
)

COPING_TEMPLATE = (
    "That's interesting that you try to {strategy}. How effective has this been for you? "
    "What other strategies have you considered?"
)

SUPPORT_TEMPLATE = (
    "It's good that you have support from {support}. How has this been helpful? "
    "What other sources of support might be available to you?"
)

TOPIC_CONTINUITY_TEMPLATE = "You mentioned {topic} earlier. How are you feeling about that now?"

# ==============================================================================
# Yes / No
# ==============================================================================

AFFIRMATION = "Could you tell me more about that?"
AFFIRMATION_WITH_THEME = "Could you tell me more about that? What specific aspects would you like to explore?"

NEGATION = "I understand. Would you like to explore a different topic?"
NEGATION_WITH_THEME = (
    "I understand. Would you like to explore a different aspect of this, "
    "or would you prefer to talk about something else?"
)

# ==============================================================================
# Banks
# ==============================================================================

CONTEXTUAL_RESPONSES: Dict[Theme, List[str]] = {
    Theme.EMOTIONAL_STATE: [
        "How long have you been feeling this way?",
        "What situations tend to trigger these feelings?",
        "How do you typically cope with these feelings?",
        "What would help you feel better?",
        "Who do you usually talk to about these feelings?",
    ],
    Theme.FEELING_EXPRESSION: [
        "When did you first notice feeling this way?",
        "What thoughts go through your mind when you feel like this?",
        "How do these feelings affect the way you see things?",
        "Is there a particular situation that brings this feeling up?",
        "What would it take for this feeling to change?",
    ],
    Theme.PROBLEM_STATEMENT: [
        "How has this affected your daily life?",
        "What have you tried so far to address this?",
        "What would you like to see change?",
        "What support would be helpful right now?",
        "How do you feel about seeking help with this?",
    ],
    Theme.UNCERTAINTY: [
        "What have you tried to understand this better?",
        "What would help you feel more clear?",
        "What information would be most helpful?",
        "Who could help you understand this better?",
        "What's the most challenging part about this uncertainty?",
    ],
    Theme.DESIRE: [
        "What would having that mean to you?",
        "How would that improve your situation?",
        "What steps could you take toward this?",
        "What's stopping you from achieving this?",
        "How would you feel if you achieved this?",
    ],
    Theme.THOUGHT_EXPRESSION: [
        "What makes you see it that way?",
        "Have you always thought about it like this?",
        "How does this thought make you feel?",
        "Is there another way of looking at this?",
        "What would change if this belief were different?",
    ],
    Theme.LIMITATION: [
        "What gets in the way when you try?",
        "Has there been a time when this felt more possible?",
        "What would make this a little easier?",
        "How does feeling unable to do this affect you?",
        "What small step might be within reach?",
    ],
    Theme.COPING: [
        "How effective has this strategy been for you?",
        "What other coping strategies have you considered?",
        "What makes this strategy work well for you?",
        "How could you enhance this coping strategy?",
        "What support do you need to maintain this strategy?",
    ],
    Theme.SUPPORT: [
        "How has this support been helpful?",
        "What other sources of support might be available?",
        "How do you feel about reaching out for support?",
        "What kind of support would be most helpful right now?",
        "How can you strengthen your support system?",
    ],
}

FALLBACK_RESPONSES: Dict[ConversationStage, List[str]] = {
    ConversationStage.INITIAL: [
        "I'm here to listen and support you. How are you feeling today?",
        "How can I help you today?",
        "What's on your mind?",
        "I'm here to talk. What would you like to discuss?",
        "How are you feeling right now?",
    ],
    ConversationStage.EXPLORING: [
        "Could you tell me more about that?",
        "How does that make you feel?",
        "What do you think about that?",
        "Could you elaborate on that?",
        "What do you mean by that?",
    ],
    ConversationStage.DEEP_DISCUSSION: [
        "How does that affect your daily life?",
        "What would you like to see change?",
        "What support would be helpful right now?",
        "How have you been coping with this?",
        "What do you think might help in this situation?",
    ],
    ConversationStage.CLOSING: [
        "Take care of yourself.",
        "I'm here if you need to talk again.",
        "Have a good day!",
        "Take it easy.",
        "Wishing you well.",
    ],
}
