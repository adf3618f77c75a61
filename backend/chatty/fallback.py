from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class KeywordRule:
	keywords: Tuple[str, ...]
	answer: str
	# any-of by default; True requires every keyword to appear
	match_all: bool = False

	def matches(self, lowered: str) -> bool:
		hits = (kw in lowered for kw in self.keywords)
		return all(hits) if self.match_all else any(hits)


# Table order is priority order: the first matching rule answers
KEYWORD_RULES: Tuple[KeywordRule, ...] = (
	KeywordRule(
		("hello", "hi", "hey"),
		"Hello! I'm Chatty, your AI assistant for Metropolia's Urban Farm Lab. How can I help you today?",
	),
	KeywordRule(
		("urban farm", "farm lab"),
		"The Urban Farm Lab at Metropolia is a collaborative platform focusing on sustainable urban agriculture. "
		"It brings together students, researchers, and industry partners to develop innovative solutions for food "
		"production in urban environments through methods like vertical farming and hydroponics.",
	),
	KeywordRule(
		("metropolia", "university"),
		"Metropolia University of Applied Sciences is Finland's largest university of applied sciences, offering "
		"practical education and conducting research that serves working life needs. The Urban Farm Lab is one of "
		"its innovative collaboration platforms.",
	),
	KeywordRule(
		("andrea",),
		"Andrea is likely a researcher or staff member associated with the Urban Farm Lab. For specific and "
		"up-to-date information about Andrea's role and contact details, I recommend checking the official "
		"Metropolia website or contacting the Urban Farm Lab directly.",
	),
	KeywordRule(
		("sustainable", "agriculture", "farming"),
		"Sustainable agriculture is a key focus of the Urban Farm Lab. The lab explores environmentally friendly "
		"food production methods suitable for urban environments, including circular economy principles and smart "
		"farming technologies.",
	),
	KeywordRule(
		("research", "project", "study"),
		"The Urban Farm Lab conducts various research projects in smart farming technologies, sustainable food "
		"systems, and urban-rural interactions. These projects often involve interdisciplinary collaboration "
		"between students, researchers, and industry partners.",
	),
	KeywordRule(
		("what", "do"),
		"I specialize in providing information about Metropolia's Urban Farm Lab. I can tell you about the lab's "
		"research, projects, sustainable agriculture methods, and how it collaborates with students and industry partners.",
		match_all=True,
	),
)

DEFAULT_ANSWERS: Tuple[str, ...] = (
	"That's an interesting question! The Urban Farm Lab focuses on developing sustainable food production "
	"solutions for urban environments. Could you tell me more about what specific aspect interests you?",
	"I'd love to help you with that! The Urban Farm Lab works on innovative urban agriculture solutions. Could "
	"you rephrase your question or ask about something more specific related to urban farming?",
	"Thanks for your question! While I specialize in Metropolia's Urban Farm Lab topics, I'd be happy to help "
	"if you have questions about urban agriculture, sustainable farming, or the lab's research projects.",
	"That's a great question! The Urban Farm Lab brings together education, research, and business "
	"collaboration to advance urban farming solutions. What specific area are you curious about?",
	"I appreciate your interest! The Urban Farm Lab explores methods like vertical farming and hydroponics to "
	"create sustainable food systems in cities. How can I assist you further?",
)

DEFAULT_ANSWER = DEFAULT_ANSWERS[0]


class KeywordResponder:
	def __init__(
		self,
		rules: Sequence[KeywordRule] = KEYWORD_RULES,
		defaults: Sequence[str] = DEFAULT_ANSWERS,
		*,
		rng: Optional[random.Random] = None,
	) -> None:
		if not defaults:
			raise ValueError("at least one default answer is required")
		self.rules: List[KeywordRule] = list(rules)
		self.defaults: List[str] = list(defaults)
		self._rng = rng or random.Random()

	@property
	def default_answer(self) -> str:
		return self.defaults[0]

	def respond(self, question: str) -> str:
		lowered = (question or "").lower()
		for rule in self.rules:
			if rule.matches(lowered):
				return rule.answer
		return self._rng.choice(self.defaults)
