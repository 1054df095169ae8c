# -*- coding: utf-8 -*-
"""
Static prompt templates.

goal_tree_from() asks the model to decompose a goal into a nested task tree
returned as JSON. The template text is fixed and must stay byte-for-byte
stable; only the goal is interpolated.
"""

from __future__ import annotations

GOAL_TREE_SCHEMA: str = """Make sure it will be convertible to the following public structs (if it will take less than a day, set daysEstimate to 1):

// MARK: - Choices
public struct Choices: Codable {
    public let thisSteps: [ThisStep]
}

// MARK: - ThisStep
public struct ThisStep: Codable {
    public let title: String
    public let daysEstimate: Int
    public let steps: [Step]
}

// MARK: - Step
public struct Step: Codable {
    public let subtitle: String
    public let subdaysEstimate: Int
}"""

GOAL_TREE_EXAMPLE_PROMPT: str = """Example prompt:
Return all the necessary sub tasks for the following goal: “become a lawyer in Ireland.” For each of this sub tasks return a list of sub tasks.  Keep on going, until a task tree is created, where each leaf is an easy task.  Return the task tree exclusively as a logically public structured json object.  Omit anything else."""

GOAL_TREE_EXAMPLE_RESPONSE: str = """Example response:
{
  "thisSteps": [
    {
      "title": "Research law schools in Ireland",
      "daysEstimate": 3,
      "steps": [
        {
          "subtitle": "Look up law schools in Ireland online",
          "subdaysEstimate": 1
        },
        {
          "subtitle": "Research admission requirements for each school",
          "subdaysEstimate": 2
        },
        {
          "subtitle": "Make a list of top law schools in Ireland",
          "subdaysEstimate": 1
        }
      ]
    },
    {
      "title": "Study for LSAT",
      "daysEstimate": 30,
      "steps": [
        {
          "subtitle": "Purchase LSAT study materials",
          "subdaysEstimate": 2
        },
        {
          "subtitle": "Create study plan for LSAT",
          "subdaysEstimate": 3
        },
        {
          "subtitle": "Study for LSAT",
          "subdaysEstimate": 25
        }
      ]
    },
    {
      "title": "Apply to law schools in Ireland",
      "daysEstimate": 120,
      "steps": [
        {
          "subtitle": "Gather necessary application materials",
          "subdaysEstimate": 5
        },
        {
          "subtitle": "Fill out and submit applications",
          "subdaysEstimate": 115
        }
      ]
    },
    {
      "title": "Prepare for move to Ireland",
      "daysEstimate": 27,
      "steps": [
        {
          "subtitle": "Research living arrangements in Ireland",
          "subdaysEstimate": 2
        },
        {
          "subtitle": "Apply for necessary visas",
          "subdaysEstimate": 15
        },
        {
          "subtitle": "Pack and prepare for move",
          "subdaysEstimate": 10
        }
      ]
    }
  ]
}"""

GOAL_TREE_REQUEST_PREFIX: str = "Return all the necessary sub tasks for the following goal: “"
GOAL_TREE_REQUEST_SUFFIX: str = "” For each of the sub tasks return a list of sub tasks.  Keep on going, until a task tree is created, where each leaf is an easy task.  Return the task tree exclusively as a logically public structured json object.  Omit anything else, JSON ONLY!."


def goal_tree_from(goal: str) -> str:
    """
    goal_tree_from(goal: str) -> str
    Returns the goal-decomposition prompt with `goal` inserted verbatim, once.
    Braces in `goal` are not placeholders.
    """
    return (
        GOAL_TREE_EXAMPLE_PROMPT
        + "\n\n"
        + GOAL_TREE_SCHEMA
        + "\n\n"
        + GOAL_TREE_EXAMPLE_RESPONSE
        + "\n\nCurrent prompt:\n"
        + GOAL_TREE_REQUEST_PREFIX
        + goal
        + GOAL_TREE_REQUEST_SUFFIX
        + "\n\n"
        + GOAL_TREE_SCHEMA
    )
