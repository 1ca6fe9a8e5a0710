"""Governance decision service.

Composes the pure decision engine with the persistence ports:

1. Resolve the effective quorum and vote policies of a motion
2. Load both policies through the policy repository
3. Aggregate attendance with the quorum policy's inclusion flags
4. Evaluate quorum, pick the official tally (manual or ballots), evaluate
   the majority
5. Consolidate and overwrite the stored Decision

Also carries the degraded (manual) tally workflow: editing a draft is pure,
saving validates the figures and requires a justification.

The service holds no state between calls. Writes for one motion must be
serialized by the caller.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from assembly_engine.application.ports.decision_repository import (
    DecisionRepositoryProtocol,
)
from assembly_engine.application.ports.policy_repository import (
    PolicyRepositoryProtocol,
)
from assembly_engine.config.engine_config import (
    DEFAULT_ENGINE_CONFIG,
    DecisionEngineConfig,
)
from assembly_engine.domain.errors.configuration import (
    PolicyNotConfiguredError,
    PolicyNotFoundError,
)
from assembly_engine.domain.errors.state_guard import StateGuardError
from assembly_engine.domain.errors.validation import (
    MissingJustificationError,
    TallyValidationError,
)
from assembly_engine.domain.models.attendance import AttendanceRecord, Proxy
from assembly_engine.domain.models.ballot import Ballot
from assembly_engine.domain.models.decision import Decision
from assembly_engine.domain.models.manual_tally import ManualTally, TallyEdit
from assembly_engine.domain.models.meeting import Meeting
from assembly_engine.domain.models.motion import Motion
from assembly_engine.domain.services.attendance_aggregator import aggregate_for_policy
from assembly_engine.domain.services.ballot_aggregator import aggregate_ballots
from assembly_engine.domain.services.decision_consolidator import (
    consolidate,
    select_tally_source,
)
from assembly_engine.domain.services.majority_evaluator import evaluate_majority
from assembly_engine.domain.services.policy_resolver import PolicyResolver
from assembly_engine.domain.services.quorum_evaluator import evaluate_quorum
from assembly_engine.domain.services.tally_reconciler import (
    reconcile_tally,
    validate_manual_tally,
)

logger = structlog.get_logger(__name__)


class GovernanceDecisionService:
    """Orchestrates decision computation and manual tally storage.

    Attributes:
        config: Engine configuration in use.
    """

    def __init__(
        self,
        policy_repository: PolicyRepositoryProtocol,
        decision_repository: DecisionRepositoryProtocol,
        config: DecisionEngineConfig = DEFAULT_ENGINE_CONFIG,
    ) -> None:
        """Initialize the service.

        Args:
            policy_repository: Lookup of quorum and vote policies.
            decision_repository: Storage for decisions and manual tallies.
            config: Engine configuration (defaults to production values).
        """
        self._policies = policy_repository
        self._decisions = decision_repository
        self.config = config
        self._log = logger.bind(component="governance_decision")

    async def decide_motion(
        self,
        motion: Motion,
        meeting: Meeting,
        attendance: Iterable[AttendanceRecord],
        ballots: Iterable[Ballot],
        proxies: Iterable[Proxy] = (),
        use_weights: bool = True,
    ) -> Decision:
        """Compute, store and return the decision of a motion.

        Args:
            motion: Motion being decided.
            meeting: Owning meeting (default policies, convocation).
            attendance: One record per roster member.
            ballots: Electronic ballots in casting order.
            proxies: Proxy delegations of the meeting.
            use_weights: Evaluate ballots by weight rather than by count.

        Returns:
            The stored Decision.

        Raises:
            PolicyNotConfiguredError: If no quorum or vote policy resolves.
            PolicyNotFoundError: If a resolved policy id does not exist.
        """
        log = self._log.bind(motion_id=motion.id, meeting_id=meeting.id)

        resolution = PolicyResolver.resolve(motion, meeting)
        try:
            quorum_policy_id = PolicyResolver.require_quorum_policy_id(
                resolution, motion.id
            )
            vote_policy_id = PolicyResolver.require_vote_policy_id(
                resolution, motion.id
            )
        except PolicyNotConfiguredError as exc:
            log.error("policy_not_configured", kind=exc.kind)
            raise

        quorum_policy = await self._policies.get_quorum_policy(quorum_policy_id)
        if quorum_policy is None:
            log.error("policy_not_found", kind="quorum", policy_id=quorum_policy_id)
            raise PolicyNotFoundError("quorum", quorum_policy_id)
        vote_policy = await self._policies.get_vote_policy(vote_policy_id)
        if vote_policy is None:
            log.error("policy_not_found", kind="vote", policy_id=vote_policy_id)
            raise PolicyNotFoundError("vote", vote_policy_id)

        records = list(attendance)
        proxies = list(proxies)
        attendance_aggregate = aggregate_for_policy(
            records, proxies, quorum_policy, motion.opened_at
        )
        quorum_result = evaluate_quorum(
            quorum_policy,
            attendance_aggregate,
            meeting.convocation_no,
            ratio_decimals=self.config.ratio_decimals,
        )

        ballot_aggregate = aggregate_ballots(
            ballots,
            weights={record.member_id: record.weight for record in records},
            motion_id=motion.id,
        )
        manual = await self._decisions.get_manual_tally(motion.id)
        tally, source = select_tally_source(
            manual, ballot_aggregate, attendance_aggregate, use_weights=use_weights
        )
        majority_result = evaluate_majority(vote_policy, tally)

        decision = consolidate(
            quorum_result, majority_result, motion_id=motion.id, source=source
        )
        await self._decisions.save_decision(decision)

        log.info(
            "decision_recorded",
            status=decision.status.value,
            reason=decision.reason.value,
            source=source.value,
            quorum_policy_id=quorum_policy.id,
            vote_policy_id=vote_policy.id,
            quorum_is_override=resolution.quorum_is_override,
            vote_is_override=resolution.vote_is_override,
        )
        return decision

    async def edit_manual_tally(
        self,
        motion_id: str,
        edit: TallyEdit,
        draft: ManualTally | None = None,
    ) -> ManualTally:
        """Apply one operator edit to a manual tally draft.

        Nothing is persisted: the caller keeps the returned draft and passes
        it back with the next edit, then saves it.

        Args:
            motion_id: Motion being counted.
            edit: The operator edit.
            draft: Current editor state; the stored tally (or an empty one)
                when omitted.

        Returns:
            The reconciled draft.

        Raises:
            DerivedFieldEditError: If ``for`` is edited in manual-total mode.
        """
        current = draft
        if current is None:
            current = await self._decisions.get_manual_tally(motion_id)
        if current is None:
            current = ManualTally(motion_id=motion_id)
        return reconcile_tally(current, edit)

    async def save_manual_tally(
        self,
        motion: Motion,
        tally: ManualTally,
        justification: str | None,
    ) -> ManualTally:
        """Validate and store a degraded (manual) tally.

        Args:
            motion: Motion the tally belongs to; must have been opened.
            tally: Figures to store.
            justification: Operator's reason for counting by hand.

        Returns:
            The stored tally.

        Raises:
            StateGuardError: If the motion was never opened.
            TallyValidationError: If the figures or justification are invalid.
            MissingJustificationError: If a required justification is empty.
        """
        log = self._log.bind(motion_id=motion.id)

        if motion.is_pending:
            raise StateGuardError(
                f"Motion {motion.id} has not been opened; nothing to count",
                reason_code="motion_not_opened",
            )
        if tally.motion_id != motion.id:
            raise TallyValidationError(
                "motion_mismatch",
                f"Tally belongs to motion {tally.motion_id}, not {motion.id}",
                field="motion_id",
            )

        validate_manual_tally(tally)

        text = (justification or "").strip()
        if not text and self.config.require_tally_justification:
            raise MissingJustificationError(motion.id)
        if len(text) > self.config.max_justification_length:
            raise TallyValidationError(
                "justification_too_long",
                f"Justification exceeds {self.config.max_justification_length} characters",
                field="justification",
                detail={"length": len(text)},
            )

        await self._decisions.save_manual_tally(tally, text)
        log.warning(
            "degraded_manual_tally_saved",
            total=tally.manual_total,
            votes_for=tally.manual_for,
            votes_against=tally.manual_against,
            votes_abstain=tally.manual_abstain,
            justification_length=len(text),
        )
        return tally
